"""
Book Service

CRUD on books with keyword search and fixed-size pagination.

Every id-based operation validates the id before the store is touched:
a malformed id is a BadRequestError, a well-formed id with no document
is a NotFoundError.
"""

import logging
import re
from typing import Any

from bookstore.config import get_settings
from bookstore.exceptions import NotFoundError
from bookstore.schemas import BookCreate, BookUpdate
from bookstore.stores import BookQuery, BookStore
from bookstore.utils import ensure_object_id

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND_MESSAGE = "Book not found."


def parse_page(page: str | int | None) -> int:
    """
    Parse a page query parameter leniently.

    Missing, non-numeric and non-positive values all mean page 1.

    Example:
        >>> parse_page("2")
        2
        >>> parse_page("abc")
        1
    """
    if page is None:
        return 1
    try:
        number = int(page)
    except (TypeError, ValueError):
        return 1
    return number if number >= 1 else 1


def build_keyword_filter(keyword: str | None) -> dict[str, Any]:
    """
    Build a case-insensitive substring filter on title.

    The keyword is escaped, so it matches literally rather than as a
    regular expression.
    """
    if not keyword:
        return {}
    return {"title": {"$regex": re.escape(keyword), "$options": "i"}}


class BookService:
    """Book operations on top of a BookStore."""

    def __init__(self, books: BookStore, per_page: int | None = None) -> None:
        self.books = books
        self.per_page = per_page or get_settings().books_per_page

    def build_query(self, keyword: str | None = None, page: str | int | None = None) -> BookQuery:
        """
        Translate search parameters into a BookQuery.

        skip = (page - 1) * per_page
        """
        current_page = parse_page(page)
        return BookQuery(
            filter=build_keyword_filter(keyword),
            limit=self.per_page,
            skip=(current_page - 1) * self.per_page,
        )

    async def find_all(
        self,
        keyword: str | None = None,
        page: str | int | None = None,
    ) -> list[dict[str, Any]]:
        """Return one page of books, optionally filtered by title keyword."""
        query = self.build_query(keyword, page)
        return await self.books.find(query)

    async def create(self, book: BookCreate, user: dict[str, Any]) -> dict[str, Any]:
        """
        Create a book owned by the given user.

        The owner always comes from the authenticated user, never from the
        payload.
        """
        document = book.model_dump(mode="json")
        document["user"] = user["_id"]

        created = await self.books.create(document)
        logger.info(f"Book created: {created['_id']} by user {user['_id']}")

        return created

    async def find_by_id(self, book_id: str) -> dict[str, Any]:
        """
        Raises:
            BadRequestError: If book_id is not a valid ObjectId
            NotFoundError: If no book has this id
        """
        object_id = ensure_object_id(book_id)

        book = await self.books.find_by_id(object_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND_MESSAGE)

        return book

    async def update_by_id(self, book_id: str, book: BookUpdate) -> dict[str, Any]:
        """
        Apply a partial update and return the updated book.

        Field values were validated by BookUpdate, so the stored document
        keeps satisfying the same rules as on creation.

        Raises:
            BadRequestError: If book_id is not a valid ObjectId
            NotFoundError: If no book has this id
        """
        object_id = ensure_object_id(book_id)

        updated = await self.books.update_by_id(object_id, book.to_update_fields())
        if updated is None:
            raise NotFoundError(BOOK_NOT_FOUND_MESSAGE)

        logger.info(f"Book updated: {book_id}")

        return updated

    async def delete_by_id(self, book_id: str) -> dict[str, Any]:
        """
        Delete a book and return it as it was before deletion.

        Raises:
            BadRequestError: If book_id is not a valid ObjectId
            NotFoundError: If no book has this id
        """
        object_id = ensure_object_id(book_id)

        deleted = await self.books.delete_by_id(object_id)
        if deleted is None:
            raise NotFoundError(BOOK_NOT_FOUND_MESSAGE)

        logger.info(f"Book deleted: {book_id}")

        return deleted
