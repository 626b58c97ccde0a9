from typing import List

from catalog.book import Book


class BookOptionParser:
    """Parses the ``title,author,id,isbn`` strings accepted on the command line.

    Only the shape is checked: four comma separated fields with integer
    identifier and ISBN. Negative or repeated identifiers are accepted.
    """

    FIELD_COUNT = 4

    @staticmethod
    def split_fields(raw: str) -> List[str]:
        if raw is None:
            return []
        return [part.strip() for part in raw.rsplit(",", BookOptionParser.FIELD_COUNT - 1)]

    @staticmethod
    def parse(raw: str) -> Book:
        fields = BookOptionParser.split_fields(raw)
        if len(fields) != BookOptionParser.FIELD_COUNT:
            raise ValueError(f"Expected 'title,author,id,isbn', got {raw!r}")
        title, author, book_id, isbn = fields
        try:
            return Book(title=title, author=author, book_id=int(book_id), isbn=int(isbn))
        except ValueError as e:
            raise ValueError(f"ID and ISBN must be integers in {raw!r}") from e
