"""
Pydantic Schemas Package

Request/response validation models.

Schema Naming Convention:
- XxxBase: Shared fields between create/update/response
- XxxCreate: Fields required when creating a new document
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookSearchParams,
    BookUpdate,
    Category,
)
from bookstore.schemas.user import (
    LoginRequest,
    SignUpRequest,
    TokenResponse,
)

__all__ = [
    # Book schemas
    "Category",
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookSearchParams",
    # Auth schemas
    "SignUpRequest",
    "LoginRequest",
    "TokenResponse",
]
