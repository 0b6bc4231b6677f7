# ABOUTME: Shared pytest fixtures for shelfquery tests.
# ABOUTME: Provides a mongomock-backed books collection, empty or seeded with a sample catalog.

import uuid
from collections.abc import Iterator

import mongomock
import pytest
from pymongo.collection import Collection

from shelfquery.db.connection import open_books
from shelfquery.db.mapping import Book, book_to_document

SAMPLE_BOOKS = [
    Book("1984", "George Orwell", "Dystopian", 1949, 10.99, True),
    Book("Animal Farm", "George Orwell", "Political Satire", 1945, 8.50, False),
    Book("Brave New World", "Aldous Huxley", "Dystopian", 1932, 11.50, False),
    Book("The Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, 14.99, True),
    Book("The Lord of the Rings", "J.R.R. Tolkien", "Fantasy", 1954, 19.99, True),
    Book("To Kill a Mockingbird", "Harper Lee", "Fiction", 1960, 12.99, True),
    Book("The Great Gatsby", "F. Scott Fitzgerald", "Fiction", 1925, 9.99, True),
    Book("The Alchemist", "Paulo Coelho", "Fiction", 1988, 10.50, False),
    Book("The Catcher in the Rye", "J.D. Salinger", "Fiction", 1951, 8.99, True),
    Book("Pride and Prejudice", "Jane Austen", "Romance", 1813, 7.99, True),
    Book("Wuthering Heights", "Emily Bronte", "Romance", 1847, 9.25, False),
    Book("The Silmarillion", "J.R.R. Tolkien", "Fantasy", 1977, 16.00, True),
]


@pytest.fixture
def sample_books() -> list[Book]:
    """The sample catalog, in insertion order."""
    return list(SAMPLE_BOOKS)


@pytest.fixture
def empty_books() -> Iterator[Collection]:
    """An empty books collection in a throwaway mongomock database."""
    books = open_books(database=f"test_{uuid.uuid4().hex}", client=mongomock.MongoClient())
    yield books
    books.drop()


@pytest.fixture
def books(empty_books: Collection, sample_books: list[Book]) -> Collection:
    """A books collection seeded with the sample catalog."""
    empty_books.insert_many([book_to_document(book) for book in sample_books])
    return empty_books
