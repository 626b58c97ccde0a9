"""Failure kinds raised by the catalog.

Only two kinds exist. Both carry the numeric value that caused the failure
and render it through ``describe()``, so callers can catch ``CatalogError``
and report either one the same way.
"""


class CatalogError(Exception):
    """Base exception for catalog failures."""

    message: str = ""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"{self.message} {self.value}"


class DuplicateISBNError(CatalogError):
    """A book with the same ISBN is already in the catalog."""

    message = "ExistingBookISBNException Error: book by this ISBN already exists in this library!"

    @property
    def isbn(self) -> int:
        return self.value


class BookNotFoundError(CatalogError):
    """No book in the catalog has the requested identifier."""

    message = "BookNotFoundException Error: Could not find any book by the ID:"

    @property
    def book_id(self) -> int:
        return self.value
