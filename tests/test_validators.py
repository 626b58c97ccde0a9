import pytest

from catalog.book import Book
from catalog.validators import BookOptionParser


def test_parse_valid_book_string():
    assert BookOptionParser.parse("Book 1, Author 1, 1, 57439") == Book("Book 1", "Author 1", 1, 57439)

def test_title_may_contain_commas():
    book = BookOptionParser.parse("Eats, Shoots & Leaves,Lynne Truss,3,1592400876")
    assert book.title == "Eats, Shoots & Leaves"
    assert book.author == "Lynne Truss"

def test_negative_numbers_accepted():
    assert BookOptionParser.parse("T,A,-1,-2").book_id == -1

@pytest.mark.parametrize("raw", ["only,three,fields", "T,A,one,2", "T,A,1,isbn"])
def test_invalid_book_strings_raise(raw):
    with pytest.raises(ValueError):
        BookOptionParser.parse(raw)
