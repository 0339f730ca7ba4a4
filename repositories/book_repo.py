from typing import List, Optional, Dict, Any
from database import Database
from schemas.responses import BookResponse
import logging

logger = logging.getLogger(__name__)


class BookRepository:

    @staticmethod
    async def get_all() -> List[BookResponse]:
        """Get all books, newest first"""
        query = "SELECT id, title, content FROM books ORDER BY id DESC"
        rows = await Database.fetch_all(query)
        return [BookRepository._row_to_response(row) for row in rows]

    @staticmethod
    async def get_by_id(book_id: int) -> Optional[BookResponse]:
        query = "SELECT id, title, content FROM books WHERE id = ? LIMIT 1"
        row = await Database.fetch_one(query, (book_id,))

        if not row:
            return None

        return BookRepository._row_to_response(row)

    @staticmethod
    def _row_to_response(row: Dict[str, Any]) -> BookResponse:
        """Convert DB row to BookResponse"""
        return BookResponse(
            id=row['id'],
            title=row['title'],
            content=row['content']
        )

    @staticmethod
    async def create(title: str, content: str) -> int:
        """Create new book, return book_id"""
        query = "INSERT INTO books (title, content) VALUES (?, ?)"
        book_id = await Database.insert(query, (title, content))
        logger.info(f"Created book {book_id}")
        return book_id

    @staticmethod
    async def update(book_id: int, title: str, content: str) -> int:
        """Replace title and content, return the number of rows updated"""
        query = "UPDATE books SET title = ?, content = ? WHERE id = ?"
        return await Database.execute(query, (title, content, book_id))

    @staticmethod
    async def delete(book_id: int) -> None:
        # No existence check: deleting a missing id is not an error
        await Database.execute("DELETE FROM books WHERE id = ?", (book_id,))
        logger.info(f"Deleted book {book_id}")

    @staticmethod
    async def count() -> int:
        result = await Database.fetch_one("SELECT COUNT(*) AS count FROM books")
        return int(result['count']) if result else 0
