import logging
from typing import Any, Dict, List

from catalog.book import Book
from catalog.exceptions import BookNotFoundError, DuplicateISBNError

logger = logging.getLogger(__name__)


class Library:
    """Manages an ordered, in-memory collection of books."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a pre-constructed Book. Prevent duplicates by ISBN."""
        for existing in self._books:
            if existing.isbn == book.isbn:
                logger.info("Rejected duplicate ISBN %s (title=%r)", book.isbn, book.title)
                raise DuplicateISBNError(book.isbn)
        self._books.append(book)
        logger.info("Book added | id=%s isbn=%s", book.book_id, book.isbn)

    def remove_book(self, book: Book) -> None:
        """Remove the first entry equal to ``book``. Does nothing when absent."""
        for index, existing in enumerate(self._books):
            if existing == book:
                del self._books[index]
                logger.info("Book removed | id=%s isbn=%s", book.book_id, book.isbn)
                return
        logger.debug("Nothing to remove for id=%s isbn=%s", book.book_id, book.isbn)

    def search_book_by_id(self, book_id: int) -> Book:
        for book in self._books:
            if book.book_id == book_id:
                return book
        logger.debug("No book with id=%s", book_id)
        raise BookNotFoundError(book_id)

    # ------------------------- Read helpers ------------------------- #
    def list_books(self) -> List[Book]:
        return list(self._books)

    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return {
            "total_books": len(self._books),
            "unique_authors": len({book.author for book in self._books}),
        }
