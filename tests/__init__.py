"""
Test Suite for Bookstore API

Test Organization:
- conftest.py: Shared fixtures (in-memory MongoDB, client, sample data)
- test_auth.py: /auth endpoints and the bearer guard
- test_books.py: /books endpoints
- test_auth_service.py / test_book_service.py: service unit tests
- test_security.py: hashing, tokens, identifiers, rate limiter, settings
- test_e2e.py: full sign up -> CRUD scenario

Running Tests:
    pip install -e ".[test]"
    pytest
    pytest tests/test_books.py -v
"""
