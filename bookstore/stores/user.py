"""
User Store

Persistence for user documents:

    {"_id": ObjectId, "name": str, "email": str, "password": <bcrypt hash>}

Email uniqueness is enforced by the unique index created in
bookstore.database.ensure_indexes(); create() lets the driver's
DuplicateKeyError propagate so the caller can classify it.
"""

from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookstore.database import USERS_COLLECTION


class UserStore:
    """Async access to the users collection."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self.collection = database[USERS_COLLECTION]

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a user and return it with its generated _id.

        Raises:
            pymongo.errors.DuplicateKeyError: If the email is already taken
        """
        document = dict(document)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        return await self.collection.find_one({"email": email})

    async def find_by_id(self, user_id: ObjectId) -> dict[str, Any] | None:
        return await self.collection.find_one({"_id": user_id})
