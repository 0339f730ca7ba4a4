from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from typing import List, Optional
from schemas.requests import CreateBookRequest, UpdateBookRequest
from schemas.responses import (
    BookResponse, BookCountResponse, CreateBookResponse, MessageResponse
)
from repositories.book_repo import BookRepository
from utils.validators import parse_book_id, has_required
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/books", response_model=CreateBookResponse)
async def create_book(request: Optional[CreateBookRequest] = None):
    request = request or CreateBookRequest()
    if not has_required(request.title, request.content):
        raise HTTPException(status_code=400, detail="Title and content are required.")

    try:
        book_id = await BookRepository.create(request.title, request.content)
    except Exception as e:
        logger.error(f"Error creating book: {e}")
        raise HTTPException(status_code=500, detail="Failed to add book")

    return CreateBookResponse(success=True, message="Book added successfully", book_id=book_id)


@router.get("/books", response_model=List[BookResponse])
async def get_books():
    """Get all books, ordered by id descending"""
    try:
        return await BookRepository.get_all()
    except Exception as e:
        logger.error(f"Error fetching books: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch books")


# Declared before /books/{book_id} so "count" is not read as an id
@router.get("/books/count", response_model=BookCountResponse)
async def get_book_count():
    try:
        count = await BookRepository.count()
    except Exception as e:
        logger.error(f"Error fetching book count: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch book count")

    return BookCountResponse(success=True, count=count)


@router.get("/books/{book_id}", response_model=BookResponse)
async def get_book(book_id: str):
    """
    Get a single book. An unknown id returns 404 with a `null` body.
    """
    parsed_id = parse_book_id(book_id)
    if parsed_id is None:
        raise HTTPException(status_code=400, detail="Invalid book id")

    try:
        book = await BookRepository.get_by_id(parsed_id)
    except Exception as e:
        logger.error(f"Error fetching book {parsed_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch book")

    if not book:
        return JSONResponse(status_code=404, content=None)

    return book


@router.put("/books", response_model=MessageResponse)
async def update_book(request: Optional[UpdateBookRequest] = None):
    request = request or UpdateBookRequest()
    if not has_required(request.id, request.title, request.content):
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        updated = await BookRepository.update(request.id, request.title, request.content)

        if updated == 0:
            raise HTTPException(status_code=404, detail="Invalid book id")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating book {request.id}: {e}")
        raise HTTPException(status_code=500, detail="Update failed")

    return MessageResponse(success=True, message="Book updated successfully")


@router.delete("/books/{book_id}", response_model=MessageResponse)
async def delete_book(book_id: str):
    """
    Delete a book. Succeeds whether or not the id existed.
    """
    parsed_id = parse_book_id(book_id)
    if parsed_id is None:
        raise HTTPException(status_code=400, detail="Missing ID")

    try:
        await BookRepository.delete(parsed_id)
    except Exception as e:
        logger.error(f"Error deleting book {parsed_id}: {e}")
        raise HTTPException(status_code=500, detail="Delete failed")

    return MessageResponse(success=True, message="Book deleted")
