"""
Services Package

Business logic, kept separate from HTTP handling (routers) and from
persistence (stores):
- auth.py: Sign up, login and bearer token resolution
- books.py: Book CRUD, keyword search and pagination
- rate_limiter.py: Rate limiting with slowapi
- security.py: Password hashing and JWT utilities
"""
