from app.models.models import (
    UNIQUE_INDEXES,
    USERS_COLLECTION,
    VIDEOS_COLLECTION,
    User,
    Video,
    VideoType,
    ensure_indexes,
    new_user,
    serialize_document,
)

__all__ = [
    "USERS_COLLECTION",
    "VIDEOS_COLLECTION",
    "UNIQUE_INDEXES",
    "User",
    "Video",
    "VideoType",
    "ensure_indexes",
    "new_user",
    "serialize_document",
]
