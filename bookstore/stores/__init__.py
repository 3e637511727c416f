"""
Stores Package

Thin adapters over MongoDB collections. Stores speak documents (dicts) and
ObjectIds; validation and error classification live in the services.

- user.py: users collection
- book.py: books collection and the BookQuery value object
"""

from bookstore.stores.book import BookQuery, BookStore
from bookstore.stores.user import UserStore

__all__ = [
    "BookQuery",
    "BookStore",
    "UserStore",
]
