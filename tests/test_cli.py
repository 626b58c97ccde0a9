import json

from typer.testing import CliRunner

from main import app

runner = CliRunner()

DUPLICATE_LINE = "ExistingBookISBNException Error: book by this ISBN already exists in this library! 57439"
NOT_FOUND_LINE = "BookNotFoundException Error: Could not find any book by the ID: 5"


def test_demo_transcript():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [DUPLICATE_LINE, NOT_FOUND_LINE]

def test_demo_rich_output_shows_remaining_book():
    result = runner.invoke(app, ["--output", "rich", "demo"])
    assert result.exit_code == 0
    assert DUPLICATE_LINE in result.stdout
    assert "Book 1" in result.stdout

def test_list_no_books():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "No books in library." in result.stdout

def test_list_keeps_insertion_order_and_reports_duplicates():
    result = runner.invoke(app, [
        "list",
        "--book", "Book 2,Author 2,2,222",
        "--book", "Book 1,Author 1,1,111",
        "--book", "Copy,Someone,3,111",
    ])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines == [
        "ExistingBookISBNException Error: book by this ISBN already exists in this library! 111",
        "2 | 222 - Book 2 by Author 2",
        "1 | 111 - Book 1 by Author 1",
    ]

def test_list_json_output():
    result = runner.invoke(app, ["-o", "json", "list", "-b", "Book 1,Author 1,1,57439"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"title": "Book 1", "author": "Author 1", "book_id": 1, "isbn": 57439}
    ]

def test_list_rejects_malformed_book():
    result = runner.invoke(app, ["list", "--book", "missing fields"])
    assert result.exit_code == 2

def test_search_found():
    result = runner.invoke(app, ["search", "1", "--book", "Found Book,Finder,1,111"])
    assert result.exit_code == 0
    assert "Book Found" in result.stdout
    assert "Title: Found Book" in result.stdout
    assert "Author: Finder" in result.stdout
    assert "ISBN: 111" in result.stdout

def test_search_not_found():
    result = runner.invoke(app, ["search", "5", "--book", "Book 1,Author 1,1,57439"])
    assert result.exit_code == 0
    assert NOT_FOUND_LINE in result.stdout

def test_remove_book():
    result = runner.invoke(app, [
        "remove", "Gone,Author,1,111",
        "--book", "Gone,Author,1,111",
        "--book", "Kept,Author,2,222",
    ])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["2 | 222 - Kept by Author"]

def test_remove_missing_book_is_silent():
    result = runner.invoke(app, ["remove", "Other,Author,9,999", "--book", "Kept,Author,2,222"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["2 | 222 - Kept by Author"]

def test_stats():
    result = runner.invoke(app, [
        "stats",
        "-b", "One,Same,1,1",
        "-b", "Two,Same,2,2",
        "-b", "Three,Other,3,3",
    ])
    assert result.exit_code == 0
    assert "Total Books: 3" in result.stdout
    assert "Unique Authors: 2" in result.stdout

def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.stdout

def test_search_negative_id():
    result = runner.invoke(app, ["search", "-1", "--book", "T,A,-1,2"])
    assert result.exit_code == 0
    assert "Book Found" in result.stdout
    assert "ID: -1" in result.stdout

def test_search_negative_id_not_found():
    result = runner.invoke(app, ["search", "-7", "--book", "T,A,-1,2"])
    assert result.exit_code == 0
    assert "Could not find any book by the ID: -7" in result.stdout
