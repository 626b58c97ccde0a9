from __future__ import annotations

import dataclasses
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Book:
    """A single book entry in the catalog.

    Instances are immutable values: two books are equal when title, author,
    identifier and ISBN all match, and changing a field means building a new
    book with ``replace``.
    """

    title: str
    author: str
    book_id: int
    isbn: int

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.book_id}, ISBN: {self.isbn})"

    def replace(self, **changes) -> "Book":
        """Return a copy of this book with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

