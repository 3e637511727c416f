"""
Book Store

Persistence for book documents:

    {
        "_id": ObjectId,
        "user": ObjectId,        # owner, set once at creation
        "title": str,
        "author": str,
        "description": str,
        "price": float,
        "category": str,
    }

Queries are described by a BookQuery (filter, limit, skip) rather than a
chained cursor API, which keeps the store trivial to fake in tests.
"""

from dataclasses import dataclass, field
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from bookstore.database import BOOKS_COLLECTION


@dataclass(frozen=True)
class BookQuery:
    """
    A single page of a filtered book listing.

    Attributes:
        filter: MongoDB filter document ({} matches everything)
        limit: Maximum number of documents to return
        skip: Number of matching documents to skip
    """

    filter: dict[str, Any] = field(default_factory=dict)
    limit: int = 0
    skip: int = 0


class BookStore:
    """Async access to the books collection."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self.collection = database[BOOKS_COLLECTION]

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a book and return it with its generated _id."""
        document = dict(document)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def find(self, query: BookQuery) -> list[dict[str, Any]]:
        """
        Run a BookQuery.

        Documents come back in the collection's natural order; no sort is
        applied.
        """
        cursor = self.collection.find(
            query.filter,
            skip=query.skip,
            limit=query.limit,
        )
        return await cursor.to_list(length=None)

    async def find_by_id(self, book_id: ObjectId) -> dict[str, Any] | None:
        return await self.collection.find_one({"_id": book_id})

    async def update_by_id(
        self,
        book_id: ObjectId,
        fields: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Set the given fields and return the document after the update.

        Returns None if no document has this id. An empty field set is a
        plain lookup, since MongoDB rejects an empty $set.
        """
        if not fields:
            return await self.find_by_id(book_id)

        return await self.collection.find_one_and_update(
            {"_id": book_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_by_id(self, book_id: ObjectId) -> dict[str, Any] | None:
        """Delete a book and return the document as it was before deletion."""
        return await self.collection.find_one_and_delete({"_id": book_id})
