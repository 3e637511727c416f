"""
Database Configuration Module

MongoDB access through Motor, the asyncio driver.

Connection Lifecycle
====================
One AsyncIOMotorClient per process:
1. The FastAPI lifespan calls connect() on startup
2. The client and database are stored on app.state
3. get_database() hands the database to route dependencies
4. close() runs on shutdown

The client owns its own connection pool, so there is nothing to open or
close per request.
"""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from bookstore.config import get_settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
BOOKS_COLLECTION = "books"


def create_client(url: str | None = None) -> AsyncIOMotorClient:
    """
    Create a Motor client for the configured MongoDB URL.

    Creating the client does not open a connection; the driver connects
    lazily on the first operation.
    """
    settings = get_settings()
    return AsyncIOMotorClient(url or settings.mongodb_url)


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the application relies on.

    The unique index on users.email is what turns a duplicate sign up into
    a DuplicateKeyError instead of a second account.
    """
    await database[USERS_COLLECTION].create_index("email", unique=True)
    logger.info("MongoDB indexes ensured")


async def connect(
    client: AsyncIOMotorClient,
    database_name: str | None = None,
) -> AsyncIOMotorDatabase:
    """
    Select the application database and prepare it for use.

    Args:
        client: Motor client (real or in-memory for tests)
        database_name: Overrides settings.mongodb_database

    Returns:
        The application database
    """
    settings = get_settings()
    database_name = database_name or settings.mongodb_database
    database = client[database_name]
    await ensure_indexes(database)
    logger.info(f"Connected to MongoDB database '{database_name}'")
    return database


def close(client: AsyncIOMotorClient) -> None:
    """Close the client and its connection pool."""
    client.close()
    logger.info("MongoDB connection closed")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    Database dependency for FastAPI.

    Returns the database prepared by the application lifespan. Tests pass
    an in-memory client to create_app(), so this stays unchanged.
    """
    return request.app.state.database
