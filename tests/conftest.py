"""
pytest Fixtures for Bookstore API Tests

Shared fixtures used across all test files.

For database tests we use mongomock-motor, an in-memory stand-in for the
Motor client:
- Fast: No MongoDB server needed
- Isolated: Each test gets a fresh client, so a fresh database
- Same API: stores and services run unchanged against it

Service unit tests don't touch a database at all; they use AsyncMock
stores (see test_auth_service.py / test_book_service.py).
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This disables rate limiting, sets a test secret key and keeps bcrypt cheap
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["BCRYPT_ROUNDS"] = "4"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from bookstore.main import create_app

# =============================================================================
# DATABASE / APP FIXTURES
# =============================================================================


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """In-memory Motor client, fresh for every test."""
    return AsyncMongoMockClient()


@pytest.fixture
def app(mongo_client: AsyncMongoMockClient) -> FastAPI:
    """Application wired to the in-memory client."""
    return create_app(mongo_client)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client.

    Using TestClient as a context manager runs the lifespan, which selects
    the database and creates the unique email index.
    """
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

SIGNUP_DATA = {
    "name": "Test User",
    "email": "test@test.com",
    "password": "Test1234#",
}

NEW_BOOK = {
    "title": "Test Book",
    "author": "Test Author",
    "description": "Test Description",
    "price": 100,
    "category": "Adventure",
}


@pytest.fixture
def signup_data() -> dict:
    return dict(SIGNUP_DATA)


@pytest.fixture
def new_book() -> dict:
    return dict(NEW_BOOK)


@pytest.fixture
def auth_token(client: TestClient, signup_data: dict) -> str:
    """Register the sample user and return its bearer token."""
    response = client.post("/auth/signup", json=signup_data)
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user_headers(client: TestClient) -> dict:
    """Register a second user for ownership scenarios."""
    response = client.post(
        "/auth/signup",
        json={
            "name": "Second User",
            "email": "second@test.com",
            "password": "Second1234#",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def sample_book(client: TestClient, auth_headers: dict, new_book: dict) -> dict:
    """Create a sample book through the API."""
    response = client.post("/books", json=new_book, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def multiple_books(client: TestClient, auth_headers: dict, new_book: dict) -> list[dict]:
    """
    Create books for search and pagination tests.

    Three titles contain "Test Book", two don't; with the default page
    size of 2 this spans three pages.
    """
    titles = [
        "Test Book One",
        "Another Title",
        "Test Book Two",
        "Unrelated",
        "test book three",
    ]
    books = []
    for title in titles:
        response = client.post(
            "/books",
            json={**new_book, "title": title},
            headers=auth_headers,
        )
        assert response.status_code == 201
        books.append(response.json())
    return books
