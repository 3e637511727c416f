"""
Utilities Package

Helper functions used across the application:
- identifiers.py: MongoDB ObjectId validation and conversion
"""

from bookstore.utils.identifiers import ensure_object_id, is_valid_object_id

__all__ = [
    "ensure_object_id",
    "is_valid_object_id",
]
