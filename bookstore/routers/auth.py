"""
Authentication Router

Handles user authentication endpoints:
- Sign up (name/email/password -> token)
- Login (email/password -> token)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Both endpoints are rate limited per client IP
"""

from fastapi import APIRouter, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import AuthServiceDep
from bookstore.schemas import LoginRequest, SignUpRequest, TokenResponse
from bookstore.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Invalid credentials"},
        409: {"description": "User already exists"},
    },
)


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a new account and receive a bearer token.",
)
@limiter.limit(settings.rate_limit_auth)
async def sign_up(
    request: Request,
    user_data: SignUpRequest,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    token = await auth_service.sign_up(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
    )
    return TokenResponse(token=token)


# Existing clients log in with GET and a JSON body; POST is the
# standards-friendly spelling of the same endpoint.
@router.api_route(
    "/login",
    methods=["GET", "POST"],
    response_model=TokenResponse,
    summary="Login with email and password",
    description="""
    Authenticate with email and password to receive a bearer token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
@limiter.limit(settings.rate_limit_auth)
async def login(
    request: Request,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    token = await auth_service.login(
        email=credentials.email,
        password=credentials.password,
    )
    return TokenResponse(token=token)
