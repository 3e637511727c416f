"""
Bookstore API Application Package

A small REST backend for user sign up / login and book CRUD, backed by MongoDB.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Motor (async MongoDB) client lifecycle and indexes
- exceptions.py: Service error taxonomy mapped to HTTP status codes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- schemas/: Pydantic request/response schemas
- stores/: MongoDB collection adapters
- services/: Business logic (auth, books, security, rate limiting)
- routers/: API route handlers
- utils/: Helper functions
"""

__version__ = "0.1.0"
