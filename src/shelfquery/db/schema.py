# ABOUTME: Collection name, field projections, and index key specs for the books collection.
# ABOUTME: Every projection excludes the store's _id so callers never see record identifiers.

from pymongo import ASCENDING

BOOKS_COLLECTION = "books"

TITLE_AUTHOR_PRICE = {"title": 1, "author": 1, "price": 1, "_id": 0}
TITLE_AUTHOR_YEAR_PRICE = {
    "title": 1,
    "author": 1,
    "published_year": 1,
    "price": 1,
    "_id": 0,
}
TITLE_YEAR_PRICE = {"title": 1, "published_year": 1, "price": 1, "_id": 0}

TITLE_INDEX = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX = [("author", ASCENDING), ("published_year", ASCENDING)]
