# ABOUTME: Named queries, mutations, aggregations, and index helpers for the books collection.
# ABOUTME: Each function takes the collection handle and makes a single store round trip.

import math
from typing import Any

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.results import DeleteResult, UpdateResult

from shelfquery.db.errors import ValidationError, log_failures
from shelfquery.db.mapping import (
    AuthorBookCount,
    DecadeBookCount,
    GenreAveragePrice,
    group_to_author_count,
    group_to_decade_count,
    group_to_genre_price,
)
from shelfquery.db.schema import (
    AUTHOR_YEAR_INDEX,
    TITLE_AUTHOR_PRICE,
    TITLE_AUTHOR_YEAR_PRICE,
    TITLE_INDEX,
    TITLE_YEAR_PRICE,
)

PAGE_SIZE = 5

Document = dict[str, Any]


@log_failures
def find_by_genre(books: Collection, genre: str) -> list[Document]:
    """Return title, author, and price of every book in a genre."""
    return list(books.find({"genre": genre}, TITLE_AUTHOR_PRICE))


@log_failures
def find_by_publication_year(books: Collection, year: int) -> list[Document]:
    """Return books published strictly after the given year."""
    return list(books.find({"published_year": {"$gt": year}}, TITLE_AUTHOR_YEAR_PRICE))


@log_failures
def find_by_author(books: Collection, author: str) -> list[Document]:
    """Return title, publication year, and price of every book by an author."""
    return list(books.find({"author": author}, TITLE_YEAR_PRICE))


@log_failures
def update_price(books: Collection, title: str, new_price: float) -> UpdateResult:
    """Set the price of the first book matching a title.

    Args:
        books: The books collection.
        title: Title of the book to update.
        new_price: The new price. Must be a finite, non-negative number.

    Returns:
        The driver's UpdateResult; matched_count is 0 if no book has the title.

    Raises:
        ValidationError: If new_price is not a non-negative number. Nothing
            is written in that case.
    """
    if (
        isinstance(new_price, bool)
        or not isinstance(new_price, (int, float))
        or not math.isfinite(new_price)
        or new_price < 0
    ):
        raise ValidationError(f"Invalid price value: {new_price!r}")

    return books.update_one({"title": title}, {"$set": {"price": new_price}})


@log_failures
def delete_book(books: Collection, title: str) -> DeleteResult:
    """Delete the first book matching a title. A missing title deletes nothing."""
    return books.delete_one({"title": title})


@log_failures
def find_in_stock_after_year(books: Collection, year: int) -> list[Document]:
    """Return in-stock books published strictly after the given year."""
    return list(
        books.find(
            {"in_stock": True, "published_year": {"$gt": year}},
            TITLE_AUTHOR_PRICE,
        )
    )


@log_failures
def sort_by_price_ascending(books: Collection) -> list[Document]:
    """Return every book, cheapest first."""
    return list(books.find({}, TITLE_AUTHOR_PRICE).sort("price", ASCENDING))


@log_failures
def sort_by_price_descending(books: Collection) -> list[Document]:
    """Return every book, most expensive first."""
    return list(books.find({}, TITLE_AUTHOR_PRICE).sort("price", DESCENDING))


@log_failures
def paginate_books(books: Collection, page: int = 1) -> list[Document]:
    """Return one page of books in the collection's natural order.

    Pages are 1-based and hold PAGE_SIZE books each.

    Raises:
        ValidationError: If page is not an integer >= 1.
    """
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ValidationError(f"Page number must be >= 1, got {page!r}")

    skip = (page - 1) * PAGE_SIZE
    return list(books.find({}, TITLE_AUTHOR_PRICE).skip(skip).limit(PAGE_SIZE))


@log_failures
def avg_price_by_genre(books: Collection) -> list[GenreAveragePrice]:
    """Average book price per genre, ordered by genre name."""
    pipeline = [
        {"$group": {"_id": "$genre", "avg_price": {"$avg": "$price"}}},
        {"$sort": {"_id": ASCENDING}},
    ]
    return [group_to_genre_price(doc) for doc in books.aggregate(pipeline)]


@log_failures
def author_with_most_books(books: Collection) -> AuthorBookCount | None:
    """Return the author with the most books, or None for an empty collection.

    Ties go to the alphabetically first author.
    """
    pipeline = [
        {"$group": {"_id": "$author", "count": {"$sum": 1}}},
        {"$sort": {"count": DESCENDING, "_id": ASCENDING}},
        {"$limit": 1},
    ]
    rows = list(books.aggregate(pipeline))
    return group_to_author_count(rows[0]) if rows else None


@log_failures
def books_by_decade(books: Collection) -> list[DecadeBookCount]:
    """Count books per publication decade (1984 -> 1980), oldest decade first."""
    pipeline = [
        {
            "$project": {
                "decade": {
                    "$subtract": [
                        "$published_year",
                        {"$mod": ["$published_year", 10]},
                    ]
                }
            }
        },
        {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
        {"$sort": {"_id": ASCENDING}},
    ]
    return [group_to_decade_count(doc) for doc in books.aggregate(pipeline)]


@log_failures
def create_title_index(books: Collection) -> str:
    """Create an ascending index on title. Returns the index name."""
    return books.create_index(TITLE_INDEX)


@log_failures
def create_author_year_index(books: Collection) -> str:
    """Create a compound index on (author, published_year). Returns the index name."""
    return books.create_index(AUTHOR_YEAR_INDEX)
