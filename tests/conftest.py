"""
Test fixtures shared across all tests.

Architecture:
- Settings are read at import time, so the environment is prepared here
  BEFORE anything from app/ is imported: a signing secret for tokens and
  the minimum bcrypt cost so hashing doesn't dominate the run.
- The database is mongomock: an in-memory stand-in that speaks the pymongo
  API, including unique indexes and DuplicateKeyError. Each test gets a
  fresh one with the same indexes the real connector creates.
- The HTTP test client drives the real FastAPI app; only the get_db
  dependency is overridden.
"""

import os

os.environ["SECRET_KEY"] = "test-signing-secret-0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ISSUE_ACCESS_TOKENS"] = "true"
os.environ["MONGODB_URI"] = ""

import mongomock
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from app import database
from app.database import get_db
from app.main import app
from app.models import ensure_indexes


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mongo_db(mongo_client):
    """Empty catalog database with the production indexes."""
    db = mongo_client["youtube_clone_test"]
    ensure_indexes(db)
    return db


@pytest.fixture(autouse=True)
def reset_connection():
    """No test inherits a shared client from another."""
    database.close()
    yield
    database.close()


@pytest_asyncio.fixture
async def client(mongo_db):
    """Async HTTP test client backed by the in-memory database."""
    app.dependency_overrides[get_db] = lambda: mongo_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# --- Seed data fixtures ---

@pytest.fixture
def video_payload():
    """A complete, valid video body. Tests copy and tweak it."""
    return {
        "id": "vid-001",
        "title": "Sourdough in Ten Steps",
        "channel": "Crumb & Crust",
        "views": "48.3K views",
        "timeAgo": "2 days ago",
        "duration": "21:04",
        "thumbnail": "https://images.example.com/thumbs/vid-001.jpg",
        "description": "From starter to loaf.",
        "video_url": "https://media.example.com/videos/vid-001.mp4",
        "channelInitial": "C",
        "type": "video",
    }


@pytest.fixture
def credentials():
    return {"email": "a@x.com", "password": "secret1"}


class _BrokenCollection:
    """Collection whose every operation fails like a lost server."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise ServerSelectionTimeoutError("server selection timed out")
        return fail


class _BrokenDatabase:
    def __getitem__(self, name):
        return _BrokenCollection()


@pytest.fixture
def broken_db():
    return _BrokenDatabase()
