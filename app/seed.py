"""
Seed the video catalog from a JSON file.

Replaces every document in the videos collection with the records in the
file (a JSON array of video objects). Raw numbers for views/duration and
an ISO `published_at` are converted to display strings on the way in.

Run with:
    python -m app.seed                      # data/sample_videos.json
    python -m app.seed path/to/videos.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pymongo.errors import PyMongoError

from app import database
from app.config import settings
from app.errors import APIError
from app.logging_config import setup_json_logging
from app.services.seeding import seed_videos

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "sample_videos.json"


def load_records(path: Path) -> list[dict]:
    with open(path, encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of videos")
    return records


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replace the video catalog with records from a JSON file.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_DATA_FILE)
    args = parser.parse_args(argv)

    setup_json_logging(settings.LOG_LEVEL)

    try:
        records = load_records(args.path)
        logger.info("Connecting to MongoDB...")
        count = seed_videos(database.connect(), records)
    except (OSError, ValueError, APIError, PyMongoError) as e:
        logger.error("Seeding failed: %s", e)
        return 1
    finally:
        database.close()

    logger.info("%d videos seeded successfully", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
