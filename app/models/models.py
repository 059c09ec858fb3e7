"""
Document shapes for the MongoDB collections.

Unlike a relational schema there are no tables to create: a collection
springs into existence on first insert. What the storage layer DOES own is
uniqueness, so this module is the single source of truth for:
- collection names
- the unique indexes that back the "email"/"id" invariants
- how a stored document is turned into something JSON can carry

Request validation lives in app/schemas. Models = database shape.
Schemas = API shape.
"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional, TypedDict

from pymongo.database import Database

USERS_COLLECTION = "users"
VIDEOS_COLLECTION = "videos"

# (collection, field) pairs that must be unique across the collection.
# Duplicate inserts fail with pymongo.errors.DuplicateKeyError.
UNIQUE_INDEXES = [
    (USERS_COLLECTION, "email"),
    (VIDEOS_COLLECTION, "id"),
]

VideoType = Literal["video", "clip"]


class User(TypedDict):
    """A registered account. `password` holds the bcrypt hash, never plaintext."""
    email: str
    password: str
    created_at: datetime


class Video(TypedDict, total=False):
    """A catalog entry.

    `id` is the display identifier the front end routes on; MongoDB's own
    `_id` is assigned on insert. The display fields (views, timeAgo,
    duration) are pre-formatted strings, not numbers.
    """
    id: str
    title: str
    channel: str
    type: VideoType
    views: str
    timeAgo: str
    duration: str
    thumbnail: str
    description: str
    video_url: str
    channelInitial: str
    channelImage: str
    channelUsername: str
    isVerified: bool
    likes: Any
    commentCount: Any
    mp4Urls: Any
    manifest: str
    published_at: str


def ensure_indexes(db: Database) -> None:
    """Create the unique indexes. Safe to call repeatedly."""
    for collection, field in UNIQUE_INDEXES:
        db[collection].create_index(field, unique=True, name=f"{field}_unique")


def new_user(email: str, password_hash: str) -> User:
    return User(
        email=email,
        password=password_hash,
        created_at=datetime.now(timezone.utc),
    )


def serialize_document(doc: Optional[dict]) -> Optional[dict]:
    """Copy a stored document with its ObjectId rendered as a string."""
    if doc is None:
        return None
    out = dict(doc)
    if "_id" in out:
        out["_id"] = str(out["_id"])
    return out
