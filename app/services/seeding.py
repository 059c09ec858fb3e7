"""
Catalog seeding.

Replaces the whole videos collection with a batch of records, typically
an export with raw numbers and timestamps. Each record is normalised to
the stored display format and validated against the same schema the
create endpoint uses, so seeded and API-created videos look identical.

The batch is validated completely before anything is deleted: a bad record
aborts the run with the existing catalog intact.
"""

import logging
from datetime import datetime
from typing import Iterable, Optional

from pymongo.database import Database

from app.errors import ValidationError
from app.models import VIDEOS_COLLECTION
from app.schemas.videos import VideoCreate
from app.services.formatting import format_duration, format_time_ago, format_views

logger = logging.getLogger(__name__)


def normalize_video_record(record: dict, now: Optional[datetime] = None) -> dict:
    """Turn raw values into display strings and fill derivable fields."""
    doc = dict(record)

    if "views" in doc:
        doc["views"] = format_views(doc["views"])
    if "duration" in doc:
        doc["duration"] = format_duration(doc["duration"])
    if not doc.get("timeAgo") and doc.get("published_at"):
        doc["timeAgo"] = format_time_ago(doc["published_at"], now=now)
    if not doc.get("channelInitial") and isinstance(doc.get("channel"), str) and doc["channel"]:
        doc["channelInitial"] = doc["channel"][0].upper()

    # Drop keys that normalised to nothing rather than storing nulls
    return {key: value for key, value in doc.items() if value is not None}


def build_seed_documents(records: Iterable[dict], now: Optional[datetime] = None) -> list[dict]:
    """Normalise and validate every record.

    Raises:
        ValidationError: a record is missing required fields, has a bad
            type value, or the batch repeats an id.
    """
    documents = []
    seen_ids = set()

    for index, record in enumerate(records):
        try:
            video = VideoCreate.model_validate(normalize_video_record(record, now=now))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Seed record {index} is invalid: {e}") from e

        if video.id in seen_ids:
            raise ValidationError(f"Seed record {index} repeats video id '{video.id}'")
        seen_ids.add(video.id)
        documents.append(video.to_document())

    return documents


def seed_videos(db: Database, records: Iterable[dict]) -> int:
    """Replace the catalog with `records`. Returns how many were inserted."""
    documents = build_seed_documents(records)

    videos = db[VIDEOS_COLLECTION]
    deleted = videos.delete_many({}).deleted_count
    logger.info("Cleared %d existing videos", deleted)

    if not documents:
        return 0

    result = videos.insert_many(documents)
    logger.info("Seeded videos", extra={"count": len(result.inserted_ids)})
    return len(result.inserted_ids)
