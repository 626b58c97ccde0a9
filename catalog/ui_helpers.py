import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from catalog.book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def _book_table(books: List[Book], title: str) -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True)
    table.add_column("ISBN", style="magenta", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    for b in books:
        table.add_row(str(b.book_id), str(b.isbn), b.title, b.author)
    return table

def print_list_result(books: List[Book]) -> None:
    """Print the catalog contents in the current output mode.
    - plain: 'ID | ISBN - Title by Author' lines, or 'No books in library.'
    - json: JSON array of book objects
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        _console.print(_book_table(books, "📚 Books"))
    else:
        for b in books:
            print(f"{b.book_id} | {b.isbn} - {b.title} by {b.author}")

def print_book_result(book: Book) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Title:[/] {book.title}\n[bold]Author:[/] {book.author}\n"
            f"[bold]ID:[/] {book.book_id}\n[bold]ISBN:[/] {book.isbn}"
        )
        _console.print(Panel.fit(content, title="📖 Book Found", border_style="green"))
    else:
        print("Book Found")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"ID: {book.book_id}")
        print(f"ISBN: {book.isbn}")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode.
    - plain: two lines
    - json: JSON object
    - rich: Panel with the main metrics
    """
    mode = get_output_mode()
    total = stats["total_books"]
    authors = stats["unique_authors"]

    if mode == "json":
        print(json.dumps({"total_books": total, "unique_authors": authors}, ensure_ascii=False))
    elif mode == "rich":
        content = f"[bold]Total Books:[/] {total}\n[bold]Unique Authors:[/] {authors}"
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Unique Authors: {authors}")
