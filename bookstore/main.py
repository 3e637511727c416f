"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests pass their own (in-memory) Motor client

2. Lifespan Events
   - startup: select the database, ensure indexes
   - shutdown: close the Motor client

3. Exception Handlers
   - ServiceError -> its status code with {"detail": message}
   - Database errors and anything unexpected -> generic 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from slowapi.errors import RateLimitExceeded

from bookstore import database
from bookstore.config import get_settings
from bookstore.exceptions import ServiceError
from bookstore.routers import auth_router, books_router
from bookstore.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(client: AsyncIOMotorClient | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        client: Motor client to use; a client for settings.mongodb_url is
            created when omitted

    Returns:
        Configured FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ----- STARTUP -----
        logger.info(f"Starting {settings.app_name}...")
        logger.info(f"Debug mode: {settings.debug}")

        # An injected client belongs to the caller and is not closed here
        owns_client = client is None
        mongo_client = database.create_client() if owns_client else client
        app.state.mongo_client = mongo_client
        app.state.database = await database.connect(mongo_client)

        yield

        # ----- SHUTDOWN -----
        logger.info(f"Shutting down {settings.app_name}...")
        if owns_client:
            database.close(mongo_client)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

User sign up / login and CRUD on books.

### Authentication
Sign up or log in to receive a token, then send it on every `/books`
request:

    Authorization: Bearer <token>
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # The limiter must live on app.state for the @limiter.limit decorators
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(ServiceError)
    async def service_exception_handler(
        request: Request,
        exc: ServiceError,
    ) -> JSONResponse:
        """Convert service errors to HTTP responses with a stable shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(
        request: Request,
        exc: PyMongoError,
    ) -> JSONResponse:
        """
        Handle MongoDB driver errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and can reach MongoDB.",
    )
    async def health_check(request: Request) -> dict:
        """
        Health check endpoint.

        Used by load balancers and container orchestrators.
        """
        try:
            await request.app.state.database.command("ping")
            database_status = "connected"
        except PyMongoError as e:
            logger.warning(f"Health check could not reach MongoDB: {e}")
            database_status = "unavailable"

        return {
            "status": "healthy" if database_status == "connected" else "degraded",
            "app": settings.app_name,
            "database": database_status,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "auth_limit": settings.rate_limit_auth,
            },
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
