"""
Identifier Helpers

Books and users are addressed by MongoDB ObjectIds. Clients send them as
24-character hex strings; every lookup checks the format before touching
the database.
"""

from bson import ObjectId

from bookstore.exceptions import BadRequestError

INVALID_ID_MESSAGE = "Please enter correct id."


def is_valid_object_id(value: object) -> bool:
    """
    Check whether a value can address a document.

    Example:
        >>> is_valid_object_id("61c234567890123456789012")
        True
        >>> is_valid_object_id("invalid-id")
        False
    """
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def ensure_object_id(value: str) -> ObjectId:
    """
    Convert a client-supplied id to an ObjectId.

    Raises:
        BadRequestError: If the value is not a well-formed ObjectId
    """
    if not is_valid_object_id(value):
        raise BadRequestError(INVALID_ID_MESSAGE)
    return ObjectId(value)
