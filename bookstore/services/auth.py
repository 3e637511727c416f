"""
Authentication Service

Orchestrates registration and login:

- sign_up: hash -> insert -> issue token
- login: look up -> compare hash -> issue token
- get_user_for_token: verify token -> load user (used by the bearer guard)

Security Features:
=================
1. Passwords are stored as bcrypt hashes, never as plain text
2. Unknown email and wrong password produce the same error
3. Email uniqueness relies on the unique index, not a check-then-insert
"""

import logging
from typing import Any

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from bookstore.exceptions import ConflictError, UnauthorizedError
from bookstore.stores import UserStore
from bookstore.services.security import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
LOGIN_REQUIRED_MESSAGE = "Login first to access this endpoint."


class AuthService:
    """Registration, login and token resolution on top of a UserStore."""

    def __init__(self, users: UserStore) -> None:
        self.users = users

    async def sign_up(self, name: str, email: str, password: str) -> str:
        """
        Register a new user and return a bearer token for it.

        Raises:
            ConflictError: If the email is already registered
        """
        hashed = hash_password(password)

        try:
            user = await self.users.create(
                {"name": name, "email": email, "password": hashed}
            )
        except DuplicateKeyError:
            logger.info(f"Sign up rejected, email already registered: {email}")
            raise ConflictError(USER_EXISTS_MESSAGE)

        logger.info(f"New user registered: {email}")

        return create_access_token(str(user["_id"]))

    async def login(self, email: str, password: str) -> str:
        """
        Authenticate a user and return a bearer token.

        Raises:
            UnauthorizedError: If the email is unknown or the password is
                wrong (same message for both)
        """
        user = await self.users.find_by_email(email)

        if user is None:
            logger.warning(f"Login failed: invalid credentials for {email}")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        if not verify_password(password, user["password"]):
            logger.warning(f"Login failed: invalid credentials for {email}")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return create_access_token(str(user["_id"]))

    async def get_user_for_token(self, token: str) -> dict[str, Any]:
        """
        Resolve a bearer token to the user it was issued for.

        The returned document never contains the password hash.

        Raises:
            UnauthorizedError: If the token is invalid or expired, or its
                user no longer exists
        """
        user_id = verify_token(token)
        if user_id is None or not ObjectId.is_valid(user_id):
            raise UnauthorizedError(LOGIN_REQUIRED_MESSAGE)

        user = await self.users.find_by_id(ObjectId(user_id))
        if user is None:
            logger.warning(f"Token refers to unknown user: {user_id}")
            raise UnauthorizedError(LOGIN_REQUIRED_MESSAGE)

        user.pop("password", None)
        return user
