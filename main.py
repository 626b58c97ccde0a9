import logging
from typing import List, Optional

import typer
from rich.console import Console

from catalog.book import Book
from catalog.exceptions import BookNotFoundError, CatalogError, DuplicateISBNError
from catalog.library import Library
from catalog.ui_helpers import (
    get_output_mode,
    print_book_result,
    print_list_result,
    print_stats_result,
    set_output_mode,
)
from catalog.validators import BookOptionParser
from config import settings

console = Console()
logger = logging.getLogger("catalog.cli")

BOOK_OPTION_HELP = "Book to load into the catalog as 'title,author,id,isbn' (repeatable)"


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")


def _parse_book(raw: str) -> Book:
    try:
        return BookOptionParser.parse(raw)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _build_library(book_options: Optional[List[str]]) -> Library:
    """Load the given books in order; duplicates are reported and skipped."""
    lib = Library()
    for raw in book_options or []:
        try:
            lib.add_book(_parse_book(raw))
        except DuplicateISBNError as e:
            print(e.describe())
    return lib


# --- Typer CLI application ---
app = typer.Typer(help=f"{settings.app_name} CLI")


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    _configure_logging()
    set_output_mode(output or settings.default_output)


@app.command("demo")
def cli_demo():
    """Run the reference scenario: a rejected duplicate ISBN and a missed search."""
    library = Library()
    book1 = Book("Book 1", "Author 1", 1, 57439)
    book2 = Book("Book 2", "Author 2", 2, 57439)

    try:
        library.add_book(book1)
        library.add_book(book2)
    except DuplicateISBNError as e:
        print(e.describe())

    found_book = book1
    try:
        found_book = library.search_book_by_id(5)
    except BookNotFoundError as e:
        print(e.describe())

    logger.debug("Demo finished with %d book(s); last found: %s", len(library), found_book)
    if get_output_mode() == "rich":
        print_list_result(library.list_books())


@app.command("list")
def cli_list(books: Optional[List[str]] = typer.Option(None, "--book", "-b", help=BOOK_OPTION_HELP)):
    """List every book in the catalog in insertion order."""
    lib = _build_library(books)
    print_list_result(lib.list_books())


@app.command("search", context_settings={"ignore_unknown_options": True})
def cli_search(
    book_id: int = typer.Argument(..., help="Identifier to look up"),
    books: Optional[List[str]] = typer.Option(None, "--book", "-b", help=BOOK_OPTION_HELP),
):
    """Find the first book with the given identifier."""
    lib = _build_library(books)
    try:
        print_book_result(lib.search_book_by_id(book_id))
    except CatalogError as e:
        print(e.describe())


@app.command("remove")
def cli_remove(
    book: str = typer.Argument(..., help="Book to remove as 'title,author,id,isbn'"),
    books: Optional[List[str]] = typer.Option(None, "--book", "-b", help=BOOK_OPTION_HELP),
):
    """Remove a book (all four fields must match) and list what remains."""
    lib = _build_library(books)
    lib.remove_book(_parse_book(book))
    print_list_result(lib.list_books())


@app.command("stats")
def cli_stats(books: Optional[List[str]] = typer.Option(None, "--book", "-b", help=BOOK_OPTION_HELP)):
    """Show catalog statistics."""
    lib = _build_library(books)
    print_stats_result(lib.get_statistics())


@app.command("version")
def cli_version():
    """Show the application name and version."""
    console.print(f"[bold]{settings.app_name}[/] {settings.app_version}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
