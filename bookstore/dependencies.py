"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers with
Depends(). Here they wire the object graph per request:

    database -> stores -> services -> routes

and implement the bearer-token guard for protected routes.
"""

from typing import Annotated, Any

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookstore.database import get_database
from bookstore.exceptions import UnauthorizedError
from bookstore.schemas import BookSearchParams
from bookstore.services.auth import LOGIN_REQUIRED_MESSAGE, AuthService
from bookstore.services.books import BookService
from bookstore.stores import BookStore, UserStore

# Instead of writing:
#   async def get_books(database: AsyncIOMotorDatabase = Depends(get_database)):
#
# You can write:
#   async def get_books(database: Database):

Database = Annotated[AsyncIOMotorDatabase, Depends(get_database)]


# =============================================================================
# Stores and Services
# =============================================================================
def get_user_store(database: Database) -> UserStore:
    return UserStore(database)


def get_book_store(database: Database) -> BookStore:
    return BookStore(database)


def get_auth_service(users: UserStore = Depends(get_user_store)) -> AuthService:
    return AuthService(users)


def get_book_service(books: BookStore = Depends(get_book_store)) -> BookService:
    return BookService(books)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Book Search Parameters
# =============================================================================
def get_book_search_params(
    keyword: str | None = Query(
        default=None,
        max_length=100,
        description="Filter by title (partial match, case-insensitive)",
        examples=["Test Book"],
    ),
    page: str | None = Query(
        default=None,
        description="Page number (1-indexed); invalid values mean page 1",
        examples=["1", "2"],
    ),
) -> BookSearchParams:
    """
    Query parameters for GET /books.

    page is taken as a string on purpose: a non-numeric page falls back to
    page 1 instead of failing validation.
    """
    return BookSearchParams(keyword=keyword, page=page)


BookFilters = Annotated[BookSearchParams, Depends(get_book_search_params)]


# =============================================================================
# Bearer Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>" and adds
# the "Authorize" button to Swagger UI. auto_error=False lets us answer a
# missing header with the same 401 as an invalid token.

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    auth_service: AuthServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    """
    Extract and validate the current user from the bearer token.

    1. Extracts the Bearer token from the Authorization header
    2. Decodes and validates the JWT (signature and expiry)
    3. Looks up the user in the database

    Returns:
        User document (without password)

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired, or
            the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError(LOGIN_REQUIRED_MESSAGE)

    return await auth_service.get_user_for_token(credentials.credentials)


CurrentUser = Annotated[dict[str, Any], Depends(get_current_user)]
