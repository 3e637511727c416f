"""
User / Auth Pydantic Schemas

Schemas:
- SignUpRequest: Registration data (name, email, password)
- LoginRequest: Credentials for login
- TokenResponse: The bearer token returned by sign up and login

There is deliberately no user response schema: user documents (and their
password hashes) are never returned by the API.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class SignUpRequest(BaseModel):
    """
    Schema for user registration.

    Example request body:
    {
        "name": "Test User",
        "email": "test@test.com",
        "password": "Test1234#"
    }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Test User"],
    )

    email: EmailStr = Field(
        ...,
        description="User's email address (unique)",
        examples=["test@test.com"],
    )

    password: str = Field(
        ...,
        min_length=6,
        max_length=72,  # bcrypt only uses the first 72 bytes
        description="Password (min 6 characters)",
        examples=["Test1234#"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize name."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class LoginRequest(BaseModel):
    """Schema for login requests."""

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["test@test.com"],
    )

    password: str = Field(
        ...,
        min_length=1,
        description="User's password",
    )


class TokenResponse(BaseModel):
    """Bearer token returned by sign up and login."""

    token: str = Field(..., description="JWT bearer token")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        },
    )
