"""
Video catalog API endpoints.

1. GET /api/videos: the whole catalog, no filtering or paging
2. POST /api/videos: add one video

Design notes:
- Video data lives at external URLs; these endpoints only move metadata.
- Filtering by type (video vs clip) and search happen in the client.
- The unique index on `id` decides duplicates, not a lookup here.
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.database import get_db
from app.errors import APIError, InternalError
from app.schemas.videos import VideoCreate
from app.services.videos import create_video, list_videos

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.get("", response_model=list[dict])
def get_videos(db: Database = Depends(get_db)):
    """Return every video document, `_id` as a string."""
    try:
        return list_videos(db)
    except Exception as e:
        logger.exception("Error fetching videos", extra={"error_type": type(e).__name__})
        raise InternalError("Error fetching videos") from e


@router.post("", response_model=dict, status_code=201)
def post_video(
    payload: VideoCreate,
    db: Database = Depends(get_db),
):
    """Create a video.

    `id`, `title`, `channel` and `type` are required; other fields are
    stored as sent. Returns 409 if another video already has this `id`.
    """
    try:
        video = create_video(db, payload.to_document())
    except APIError as e:
        logger.warning("Video rejected: %s", e.message, extra={"video_id": payload.id})
        raise
    except Exception as e:
        logger.exception("Error creating video", extra={"error_type": type(e).__name__})
        raise InternalError("Error creating video") from e

    logger.info("Video created", extra={"video_id": payload.id})
    return video
