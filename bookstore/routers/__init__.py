"""
API Routers Package

Router Structure:
- auth.py: /auth/* endpoints (sign up, login)
- books.py: /books/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore.routers.auth import router as auth_router
from bookstore.routers.books import router as books_router

__all__ = [
    "auth_router",
    "books_router",
]
