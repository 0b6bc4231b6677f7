# ABOUTME: Book dataclass plus the row types returned by the aggregation queries.
# ABOUTME: Converts Books to documents and $group rows to result dataclasses.

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Book:
    """A book in the catalog collection.

    The store is schema-less; these six fields are the convention every
    query relies on. Title acts as a natural key for updates and deletes
    but is not guaranteed unique.
    """

    title: str
    author: str
    genre: str
    published_year: int
    price: float
    in_stock: bool


@dataclass
class GenreAveragePrice:
    """Mean price of the books in one genre."""

    genre: str
    avg_price: float


@dataclass
class AuthorBookCount:
    author: str
    count: int


@dataclass
class DecadeBookCount:
    decade: int
    count: int


def book_to_document(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict suitable for insert_one/insert_many."""
    return asdict(book)


def group_to_genre_price(doc: dict[str, Any]) -> GenreAveragePrice:
    """Convert a {_id: genre, avg_price} group row."""
    return GenreAveragePrice(genre=doc["_id"], avg_price=doc["avg_price"])


def group_to_author_count(doc: dict[str, Any]) -> AuthorBookCount:
    """Convert an {_id: author, count} group row."""
    return AuthorBookCount(author=doc["_id"], count=doc["count"])


def group_to_decade_count(doc: dict[str, Any]) -> DecadeBookCount:
    """Convert a {_id: decade, count} group row."""
    return DecadeBookCount(decade=doc["_id"], count=doc["count"])
