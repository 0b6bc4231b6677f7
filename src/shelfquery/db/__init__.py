# ABOUTME: Public API for the shelfquery books data access layer.
# ABOUTME: Exports the connection helper, record types, errors, and every query.

from shelfquery.db.connection import DEFAULT_DATABASE, DEFAULT_MONGO_URI, open_books
from shelfquery.db.errors import StoreError, ValidationError
from shelfquery.db.mapping import AuthorBookCount, Book, DecadeBookCount, GenreAveragePrice
from shelfquery.db.queries import (
    PAGE_SIZE,
    author_with_most_books,
    avg_price_by_genre,
    books_by_decade,
    create_author_year_index,
    create_title_index,
    delete_book,
    find_by_author,
    find_by_genre,
    find_by_publication_year,
    find_in_stock_after_year,
    paginate_books,
    sort_by_price_ascending,
    sort_by_price_descending,
    update_price,
)

__all__ = [
    "DEFAULT_DATABASE",
    "DEFAULT_MONGO_URI",
    "PAGE_SIZE",
    "AuthorBookCount",
    "Book",
    "DecadeBookCount",
    "GenreAveragePrice",
    "StoreError",
    "ValidationError",
    "author_with_most_books",
    "avg_price_by_genre",
    "books_by_decade",
    "create_author_year_index",
    "create_title_index",
    "delete_book",
    "find_by_author",
    "find_by_genre",
    "find_by_publication_year",
    "find_in_stock_after_year",
    "open_books",
    "paginate_books",
    "sort_by_price_ascending",
    "sort_by_price_descending",
    "update_price",
]
