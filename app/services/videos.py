"""
Catalog operations on the videos collection.
"""

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.errors import ConflictError
from app.models import VIDEOS_COLLECTION, serialize_document

VIDEO_EXISTS_MESSAGE = "Video with this id already exists"


def list_videos(db: Database) -> list[dict]:
    """Every video in storage order. An empty catalog is an empty list."""
    return [serialize_document(doc) for doc in db[VIDEOS_COLLECTION].find({})]


def create_video(db: Database, document: dict) -> dict:
    """Insert one video and return it with its storage-assigned _id.

    Raises:
        ConflictError: another video already uses this `id`.
    """
    doc = dict(document)
    try:
        result = db[VIDEOS_COLLECTION].insert_one(doc)
    except DuplicateKeyError as e:
        raise ConflictError(VIDEO_EXISTS_MESSAGE) from e

    doc["_id"] = result.inserted_id
    return serialize_document(doc)
