"""
Tests for Books API Endpoints

This module tests all CRUD operations for the /books endpoints.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

from unittest.mock import AsyncMock, patch

from bson import ObjectId
from fastapi import status
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from bookstore.dependencies import get_current_user
from bookstore.main import settings


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_empty(self, client, auth_headers):
        """Test listing books when the collection is empty."""
        response = client.get("/books", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, auth_headers, sample_book):
        """Test listing books returns expected data."""
        response = client.get("/books", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["_id"] == sample_book["_id"]
        assert data[0]["title"] == "Test Book"

    def test_list_books_keyword(self, client, auth_headers, multiple_books):
        """Test keyword search is a case-insensitive title match."""
        response = client.get(
            "/books",
            params={"keyword": "Test Book", "page": "1"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == ["Test Book One", "Test Book Two"]

        response = client.get(
            "/books",
            params={"keyword": "Test Book", "page": "2"},
            headers=auth_headers,
        )
        titles = [book["title"] for book in response.json()]
        assert titles == ["test book three"]

    def test_list_books_keyword_is_literal(self, client, auth_headers, multiple_books):
        """Test regex metacharacters in the keyword match literally."""
        response = client.get(
            "/books",
            params={"keyword": ".*"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_pagination(self, client, auth_headers, multiple_books):
        """Test fixed page size of 2 and skipping earlier pages."""
        page1 = client.get("/books", params={"page": "1"}, headers=auth_headers).json()
        page2 = client.get("/books", params={"page": "2"}, headers=auth_headers).json()
        page3 = client.get("/books", params={"page": "3"}, headers=auth_headers).json()

        assert [b["title"] for b in page1] == ["Test Book One", "Another Title"]
        assert [b["title"] for b in page2] == ["Test Book Two", "Unrelated"]
        assert [b["title"] for b in page3] == ["test book three"]

    def test_list_books_invalid_page_defaults_to_first(
        self, client, auth_headers, multiple_books
    ):
        """Test that a non-numeric page means page 1."""
        response = client.get(
            "/books",
            params={"page": "abc"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert [b["title"] for b in response.json()] == ["Test Book One", "Another Title"]

    def test_list_books_past_last_page(self, client, auth_headers, multiple_books):
        """Test that a page past the end is empty."""
        response = client.get("/books", params={"page": "10"}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestCreateBook:
    """Tests for POST /books endpoint."""

    def test_create_book_success(self, client, auth_headers, new_book, auth_token):
        """Test creating a book with all fields."""
        response = client.post("/books", json=new_book, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert ObjectId.is_valid(data["_id"])
        assert data["title"] == "Test Book"
        assert data["author"] == "Test Author"
        assert data["description"] == "Test Description"
        assert data["price"] == 100
        assert data["category"] == "Adventure"

    def test_create_book_owner_from_token(
        self, client, auth_headers, second_user_headers, new_book
    ):
        """Test that a client-supplied user is ignored."""
        other = client.post("/books", json=new_book, headers=second_user_headers).json()

        response = client.post(
            "/books",
            json={**new_book, "user": other["user"]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["user"] != other["user"]

    def test_create_book_negative_price(self, client, auth_headers, new_book):
        """Test that a negative price is rejected."""
        response = client.post(
            "/books",
            json={**new_book, "price": -1},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_create_book_invalid_category(self, client, auth_headers, new_book):
        """Test that an unknown category is rejected."""
        response = client.post(
            "/books",
            json={**new_book, "category": "Poetry"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_create_book_missing_fields(self, client, auth_headers):
        """Test that all content fields are required."""
        response = client.post(
            "/books",
            json={"title": "Only A Title"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_create_book_requires_auth(self, client, new_book):
        """Test that creating a book requires a token."""
        response = client.post("/books", json=new_book)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetBook:
    """Tests for GET /books/{book_id} endpoint."""

    def test_get_book_success(self, client, auth_headers, sample_book):
        """Test getting a book by ID."""
        response = client.get(f"/books/{sample_book['_id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == sample_book

    def test_get_book_invalid_id(self, client, auth_headers):
        """Test that a malformed id is a bad request."""
        response = client.get("/books/invalid-id", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Please enter correct id."

    def test_get_book_not_found(self, client, auth_headers):
        """Test getting a non-existent book returns 404."""
        response = client.get(f"/books/{ObjectId()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()


class TestUpdateBook:
    """Tests for PUT /books/{book_id} endpoint."""

    def test_update_book_partial(self, client, auth_headers, sample_book):
        """Test that only provided fields change."""
        response = client.put(
            f"/books/{sample_book['_id']}",
            json={"title": "Updated Book"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data == {**sample_book, "title": "Updated Book"}

    def test_update_book_multiple_fields(self, client, auth_headers, sample_book):
        """Test updating several fields at once."""
        response = client.put(
            f"/books/{sample_book['_id']}",
            json={"price": 15.99, "category": "Crime"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["price"] == 15.99
        assert data["category"] == "Crime"
        assert data["title"] == sample_book["title"]

    def test_update_book_cannot_change_owner(
        self, client, auth_headers, sample_book
    ):
        """Test that the owner is not writable."""
        response = client.put(
            f"/books/{sample_book['_id']}",
            json={"user": str(ObjectId())},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"] == sample_book["user"]

    def test_update_book_negative_price(self, client, auth_headers, sample_book):
        """Test that validation still applies on update."""
        response = client.put(
            f"/books/{sample_book['_id']}",
            json={"price": -5},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_update_book_invalid_category(self, client, auth_headers, sample_book):
        """Test that the category must stay in the enumerated set."""
        response = client.put(
            f"/books/{sample_book['_id']}",
            json={"category": "Poetry"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_update_book_invalid_id(self, client, auth_headers):
        """Test that a malformed id is a bad request."""
        response = client.put(
            "/books/invalid-id",
            json={"title": "Updated Book"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_not_found(self, client, auth_headers):
        """Test updating a non-existent book returns 404."""
        response = client.put(
            f"/books/{ObjectId()}",
            json={"title": "Updated Book"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteBook:
    """Tests for DELETE /books/{book_id} endpoint."""

    def test_delete_book_success(self, client, auth_headers, sample_book):
        """Test deleting returns the deleted book and removes it."""
        response = client.delete(f"/books/{sample_book['_id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == sample_book

        response = client.get(f"/books/{sample_book['_id']}", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_invalid_id(self, client, auth_headers):
        """Test that a malformed id is a bad request."""
        response = client.delete("/books/invalid-id", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_book_not_found(self, client, auth_headers):
        """Test deleting a non-existent book returns 404."""
        response = client.delete(f"/books/{ObjectId()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDatabaseErrors:
    """Tests for driver failures surfacing as generic errors."""

    def test_store_failure_is_generic_500(self, client, auth_headers):
        """Test that driver errors don't leak internals."""
        with patch(
            "bookstore.services.books.BookService.find_all",
            new=AsyncMock(side_effect=ServerSelectionTimeoutError("mongo-1:27017 timed out")),
        ):
            response = client.get("/books", headers=auth_headers)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = response.json()["detail"]
        assert detail == "A database error occurred. Please try again later."
        assert "mongo-1" not in detail


class TestUnexpectedErrors:
    """Tests for the catch-all error handler."""

    @staticmethod
    def _failing_get(app, debug: bool):
        app.dependency_overrides[get_current_user] = lambda: {"_id": ObjectId()}
        with patch(
            "bookstore.services.books.BookService.find_all",
            new=AsyncMock(side_effect=RuntimeError("secret connection string")),
        ), patch.object(settings, "debug", debug):
            with TestClient(app, raise_server_exceptions=False) as test_client:
                return test_client.get("/books")

    def test_unexpected_error_is_generic_500(self, app):
        """Test that the exception text is not sent to the caller."""
        response = self._failing_get(app, debug=False)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "An internal error occurred."}
        assert "secret" not in response.text

    def test_unexpected_error_in_debug_mode(self, app):
        """Test that debug mode shows the exception text."""
        response = self._failing_get(app, debug=True)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "secret connection string"}


def test_health_check(client):
    """Test the health endpoint is public."""
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["app"] == "Bookstore API"
    assert "database" in data
