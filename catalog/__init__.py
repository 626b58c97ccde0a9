"""Book Catalog - Core Application Package

This package contains the core catalog modules:
- Data model (book.py)
- Catalog management logic (library.py)
- Failure kinds (exceptions.py)
- Output and input helpers for the CLI (ui_helpers.py, validators.py)
"""

from catalog.book import Book
from catalog.exceptions import BookNotFoundError, CatalogError, DuplicateISBNError
from catalog.library import Library

__all__ = ["Book", "Library", "CatalogError", "DuplicateISBNError", "BookNotFoundError"]
