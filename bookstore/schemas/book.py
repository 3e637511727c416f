"""
Book Pydantic Schemas

Handles:
- Category validation against a closed set
- Price validation (non-negative)
- ObjectId serialization for responses

Books are stored as plain MongoDB documents; these schemas validate what
comes in and shape what goes out.
"""

from enum import Enum
from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Closed set of book categories."""

    ADVENTURE = "Adventure"
    CLASSICS = "Classics"
    CRIME = "Crime"
    FANTASY = "Fantasy"
    HORROR = "Horror"


def _object_id_to_str(value: Any) -> Any:
    """Render ObjectIds as their 24-character hex form."""
    if isinstance(value, ObjectId):
        return str(value)
    return value


ObjectIdStr = Annotated[str, BeforeValidator(_object_id_to_str)]


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Text fields (must not be blank)
    - Price (must be >= 0)
    - Category (must be a known Category)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Test Book"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Test Author"],
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Book description or summary",
        examples=["Test Description"],
    )

    price: float = Field(
        ...,
        ge=0,
        description="Book price",
        examples=[100, 12.99],
    )

    category: Category = Field(
        ...,
        description="Book category",
        examples=[Category.ADVENTURE],
    )

    @field_validator("title", "author", "description")
    @classmethod
    def text_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize text fields."""
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    The owner is never taken from the body: a "user" key is ignored along
    with any other unknown field.

    Example request body:
    {
        "title": "Test Book",
        "author": "Test Author",
        "description": "Test Description",
        "price": 100,
        "category": "Adventure"
    }
    """

    model_config = ConfigDict(extra="ignore")


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional; only the provided ones are written.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    author: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author name",
    )

    description: str | None = Field(
        default=None,
        min_length=1,
        max_length=5000,
        description="Book description",
    )

    price: float | None = Field(
        default=None,
        ge=0,
        description="Book price",
    )

    category: Category | None = Field(
        default=None,
        description="Book category",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "author", "description")
    @classmethod
    def text_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate text fields if provided."""
        if v is not None and not v.strip():
            raise ValueError("Field cannot be empty or whitespace")
        return v.strip() if v else v

    def to_update_fields(self) -> dict[str, Any]:
        """
        Fields to $set on the stored document.

        Unset fields and explicit nulls are left out, so a partial update
        never clears a required field.
        """
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class BookResponse(BookBase):
    """
    Schema for book responses.

    Serialized with MongoDB's field names, so clients see "_id" and "user"
    as hex strings:

        {"_id": "62fc...", "user": "658c...", "title": ..., ...}
    """

    id: ObjectIdStr = Field(..., alias="_id", description="Unique identifier")
    user: ObjectIdStr = Field(..., description="Id of the user who created the book")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "62fc6313f039332c34c81b2d",
                "user": "658c6313f039332c34c81b2d",
                "title": "Test Book",
                "author": "Test Author",
                "description": "Test Description",
                "price": 100,
                "category": "Adventure",
            }
        },
    )


class BookSearchParams(BaseModel):
    """
    Query parameters for GET /books.

    page is kept as the raw string; BookService falls back to page 1 when
    it is missing or not a positive integer.
    """

    keyword: str | None = Field(
        default=None,
        description="Case-insensitive substring matched against the title",
        examples=["Test Book"],
    )

    page: str | None = Field(
        default=None,
        description="Page number (1-indexed)",
        examples=["1", "2"],
    )
