#!/usr/bin/env python3
"""
Database Seed Script

Populates MongoDB with a demo user and sample books for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

This script:
1. Connects to MongoDB using app settings
2. Clears existing users and books (optional)
3. Registers a demo user through AuthService
4. Creates sample books in every category through BookService
"""

import asyncio

from motor.motor_asyncio import AsyncIOMotorDatabase

from bookstore import database
from bookstore.database import BOOKS_COLLECTION, USERS_COLLECTION
from bookstore.schemas import BookCreate, Category
from bookstore.services.auth import AuthService
from bookstore.services.books import BookService
from bookstore.services.security import verify_token
from bookstore.stores import BookStore, UserStore

DEMO_USER = {
    "name": "Demo User",
    "email": "demo@example.com",
    "password": "Demo1234#",
}

BOOKS_DATA = [
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "description": "Bilbo Baggins is swept into a quest to reclaim a dwarven kingdom.",
        "price": 14.99,
        "category": Category.FANTASY,
    },
    {
        "title": "Treasure Island",
        "author": "Robert Louis Stevenson",
        "description": "Young Jim Hawkins sails in search of buried pirate gold.",
        "price": 9.99,
        "category": Category.ADVENTURE,
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "description": "Elizabeth Bennet navigates manners, marriage and misjudgement.",
        "price": 8.5,
        "category": Category.CLASSICS,
    },
    {
        "title": "Murder on the Orient Express",
        "author": "Agatha Christie",
        "description": "Hercule Poirot investigates a murder aboard a snowbound train.",
        "price": 11.25,
        "category": Category.CRIME,
    },
    {
        "title": "Dracula",
        "author": "Bram Stoker",
        "description": "A Transylvanian count brings terror to Victorian England.",
        "price": 7.99,
        "category": Category.HORROR,
    },
]


async def clear_data(db: AsyncIOMotorDatabase) -> None:
    """Clear all existing users and books."""
    print("Clearing existing data...")
    await db[BOOKS_COLLECTION].delete_many({})
    await db[USERS_COLLECTION].delete_many({})
    print("Data cleared.")


async def create_demo_user(db: AsyncIOMotorDatabase) -> dict:
    """Register the demo user and return its document."""
    print("Creating demo user...")
    users = UserStore(db)
    token = await AuthService(users).sign_up(**DEMO_USER)
    user = await users.find_by_email(DEMO_USER["email"])
    print(f"Created user {user['email']} (token user id: {verify_token(token)})")
    return user


async def create_books(db: AsyncIOMotorDatabase, user: dict) -> list[dict]:
    """Create the sample books owned by the demo user."""
    print("Creating books...")
    service = BookService(BookStore(db))
    books = [await service.create(BookCreate(**data), user) for data in BOOKS_DATA]
    print(f"Created {len(books)} books.")
    return books


async def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    client = database.create_client()

    try:
        db = await database.connect(client)

        if clear_existing:
            await clear_data(db)

        user = await create_demo_user(db)
        books = await create_books(db, user)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: 1 ({DEMO_USER['email']} / {DEMO_USER['password']})")
        print(f"  - Books: {len(books)}")
    finally:
        database.close(client)


if __name__ == "__main__":
    asyncio.run(seed_database())
