# ABOUTME: MongoDB connection settings and the books collection handle for shelfquery.
# ABOUTME: Resolves URI and database from arguments, then environment, then defaults.

import logging
import os

from pymongo import MongoClient
from pymongo.collection import Collection

from shelfquery.db.schema import BOOKS_COLLECTION

logger = logging.getLogger(__name__)

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "bookstore"
SERVER_SELECTION_TIMEOUT_MS = 5000

MONGO_URI_ENV = "SHELFQUERY_MONGO_URI"
DATABASE_ENV = "SHELFQUERY_DATABASE"


def resolve_settings(uri: str | None = None, database: str | None = None) -> tuple[str, str]:
    """Pick the Mongo URI and database name.

    Explicit arguments win over the SHELFQUERY_MONGO_URI / SHELFQUERY_DATABASE
    environment variables, which win over the module defaults.
    """
    resolved_uri = uri or os.environ.get(MONGO_URI_ENV) or DEFAULT_MONGO_URI
    resolved_db = database or os.environ.get(DATABASE_ENV) or DEFAULT_DATABASE
    return resolved_uri, resolved_db


def open_books(
    uri: str | None = None,
    database: str | None = None,
    *,
    client: MongoClient | None = None,
) -> Collection:
    """Return a handle to the books collection.

    The client is created lazily by pymongo; no round trip happens until the
    first query. The caller owns the client and is responsible for closing it.

    Args:
        uri: Mongo connection string. Ignored when client is given.
        database: Database name holding the books collection.
        client: An existing client to reuse instead of creating one.

    Returns:
        The books collection of the resolved database.
    """
    resolved_uri, resolved_db = resolve_settings(uri, database)
    if client is None:
        client = MongoClient(resolved_uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
        logger.debug("Created MongoClient for %s", resolved_uri)
    return client[resolved_db][BOOKS_COLLECTION]
