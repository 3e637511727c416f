"""
Books Router

CRUD endpoints for books. Every route requires a bearer token.

Responses use MongoDB field names ("_id", "user") with ids rendered as hex
strings; see BookResponse.
"""

from fastapi import APIRouter, status

from bookstore.dependencies import BookFilters, BookServiceDep, CurrentUser
from bookstore.schemas import BookCreate, BookResponse, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Invalid book id"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="Get one page of books, optionally filtered by a title keyword.",
)
async def get_all_books(
    filters: BookFilters,
    book_service: BookServiceDep,
    _: CurrentUser,
) -> list[dict]:
    """
    List books with keyword search and fixed-size pagination.

    Examples:
        GET /books?keyword=test
        GET /books?page=2
    """
    return await book_service.find_all(keyword=filters.keyword, page=filters.page)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book owned by the authenticated user.",
)
async def create_book(
    book_data: BookCreate,
    book_service: BookServiceDep,
    current_user: CurrentUser,
) -> dict:
    return await book_service.create(book_data, current_user)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
async def get_book(
    book_id: str,
    book_service: BookServiceDep,
    _: CurrentUser,
) -> dict:
    return await book_service.find_by_id(book_id)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update some or all fields of a book. Only provided fields change.",
)
async def update_book(
    book_id: str,
    book_data: BookUpdate,
    book_service: BookServiceDep,
    _: CurrentUser,
) -> dict:
    return await book_service.update_by_id(book_id, book_data)


@router.delete(
    "/{book_id}",
    response_model=BookResponse,
    summary="Delete a book",
    description="Delete a book and return it as it was before deletion.",
)
async def delete_book(
    book_id: str,
    book_service: BookServiceDep,
    _: CurrentUser,
) -> dict:
    return await book_service.delete_by_id(book_id)
