"""
MongoDB connection management.

Key concepts:
- One MongoClient per process. pymongo's client is thread-safe and keeps
  its own connection pool, so every request shares it instead of opening
  a connection per call.
- connect() is lazy and idempotent: the first caller builds the client,
  pings the server and creates the unique indexes; everyone after that
  gets the same database handle back.
- get_db() is a "dependency" that FastAPI injects into route handlers.
  Tests swap it out through app.dependency_overrides.
"""

import logging
import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.config import settings
from app.errors import DatabaseConnectionError
from app.models import ensure_indexes

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None
_lock = threading.Lock()


def connect() -> Database:
    """Return the application database, connecting on first use.

    Raises:
        DatabaseConnectionError: MONGODB_URI is empty, or the server did
            not answer within MONGODB_TIMEOUT_MS.
    """
    global _client

    if _client is None:
        with _lock:
            # Another thread may have finished connecting while we waited
            if _client is None:
                _client = _open_client()

    return _client[settings.MONGODB_DB]


def _open_client() -> MongoClient:
    if not settings.MONGODB_URI:
        raise DatabaseConnectionError("Database connection string is not configured")

    client = MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    try:
        # MongoClient connects lazily; ping forces a round trip now
        client.admin.command("ping")
        ensure_indexes(client[settings.MONGODB_DB])
    except PyMongoError as e:
        client.close()
        logger.error("MongoDB connection failed", extra={"error_type": type(e).__name__})
        raise DatabaseConnectionError() from e

    logger.info("Connected to MongoDB database '%s'", settings.MONGODB_DB)
    return client


def close() -> None:
    """Drop the shared client. The next connect() starts fresh."""
    global _client

    with _lock:
        if _client is not None:
            _client.close()
            _client = None


def get_db() -> Database:
    """FastAPI dependency that provides the database handle.

    Usage in a route:
        @router.get("/items")
        def get_items(db: Database = Depends(get_db)):
            ...

    Nothing to clean up per request: the client lives for the whole
    process and is closed by the app's shutdown hook.
    """
    return connect()
