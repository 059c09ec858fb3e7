"""
Tests for catalog seeding: normalisation, validation, and the seed command.
"""

import json
from datetime import datetime, timezone

import mongomock
import pytest

from app import database, seed
from app.config import settings
from app.errors import ValidationError
from app.services.seeding import build_seed_documents, normalize_video_record, seed_videos

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

RAW_VIDEO = {
    "id": "v-001",
    "title": "Building a Home Studio",
    "channel": "studio notes",
    "views": 1_250_000,
    "duration": 930,
    "published_at": "2025-05-30T12:00:00Z",
    "type": "video",
}


def test_normalize_converts_raw_values():
    doc = normalize_video_record(RAW_VIDEO, now=NOW)

    assert doc["views"] == "1.2M views"
    assert doc["duration"] == "15:30"
    assert doc["timeAgo"] == "2 days ago"
    assert doc["channelInitial"] == "S"
    # Source record is untouched
    assert RAW_VIDEO["views"] == 1_250_000


def test_normalize_keeps_preformatted_values():
    record = dict(RAW_VIDEO, views="3K views", duration="1:00", timeAgo="1 week ago", channelInitial="N")

    doc = normalize_video_record(record, now=NOW)

    assert doc["views"] == "3K views"
    assert doc["duration"] == "1:00"
    assert doc["timeAgo"] == "1 week ago"
    assert doc["channelInitial"] == "N"


def test_normalize_drops_null_values():
    doc = normalize_video_record(dict(RAW_VIDEO, thumbnail=None, views=None), now=NOW)

    assert "thumbnail" not in doc
    assert "views" not in doc


def test_build_rejects_invalid_record():
    bad = {"id": "v-002", "title": "No channel", "type": "video"}

    with pytest.raises(ValidationError) as exc_info:
        build_seed_documents([RAW_VIDEO, bad], now=NOW)

    assert "record 1" in exc_info.value.message


def test_build_rejects_bad_timestamp():
    with pytest.raises(ValidationError):
        build_seed_documents([dict(RAW_VIDEO, published_at="yesterday")], now=NOW)


def test_build_rejects_repeated_ids():
    with pytest.raises(ValidationError) as exc_info:
        build_seed_documents([RAW_VIDEO, dict(RAW_VIDEO, title="Copy")], now=NOW)

    assert "v-001" in exc_info.value.message


def test_seed_replaces_catalog(mongo_db):
    mongo_db["videos"].insert_one({"id": "old", "title": "Old", "channel": "Old", "type": "video"})
    clip = dict(RAW_VIDEO, id="c-001", type="clip", duration=20)

    count = seed_videos(mongo_db, [RAW_VIDEO, clip])

    assert count == 2
    ids = [doc["id"] for doc in mongo_db["videos"].find({})]
    assert ids == ["v-001", "c-001"]


def test_seed_invalid_batch_leaves_catalog_intact(mongo_db):
    mongo_db["videos"].insert_one({"id": "old", "title": "Old", "channel": "Old", "type": "video"})

    with pytest.raises(ValidationError):
        seed_videos(mongo_db, [dict(RAW_VIDEO, type="movie")])

    assert mongo_db["videos"].count_documents({}) == 1


def test_seed_empty_batch_clears_catalog(mongo_db):
    mongo_db["videos"].insert_one({"id": "old", "title": "Old", "channel": "Old", "type": "video"})

    assert seed_videos(mongo_db, []) == 0
    assert mongo_db["videos"].count_documents({}) == 0


@pytest.fixture
def seed_database(monkeypatch):
    """Let the seed command connect to one shared in-memory server."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(settings, "MONGODB_URI", "mongodb://localhost:27017")
    monkeypatch.setattr(database, "MongoClient", lambda *args, **kwargs: client)
    return client[settings.MONGODB_DB]


def test_seed_command(tmp_path, seed_database):
    data_file = tmp_path / "videos.json"
    data_file.write_text(json.dumps([RAW_VIDEO]), encoding="utf-8")

    assert seed.main([str(data_file)]) == 0

    stored = seed_database["videos"].find_one({"id": "v-001"})
    assert stored["views"] == "1.2M views"
    assert stored["duration"] == "15:30"


def test_seed_command_bundled_sample(seed_database):
    assert seed.main([]) == 0
    assert seed_database["videos"].count_documents({}) > 0


def test_seed_command_rejects_non_array(tmp_path, seed_database):
    data_file = tmp_path / "videos.json"
    data_file.write_text(json.dumps({"id": "v-001"}), encoding="utf-8")

    assert seed.main([str(data_file)]) == 1


def test_seed_command_missing_file(tmp_path, seed_database):
    assert seed.main([str(tmp_path / "missing.json")]) == 1


def test_seed_command_without_database(tmp_path, monkeypatch):
    data_file = tmp_path / "videos.json"
    data_file.write_text(json.dumps([RAW_VIDEO]), encoding="utf-8")
    monkeypatch.setattr(settings, "MONGODB_URI", "")

    assert seed.main([str(data_file)]) == 1


def test_build_rejects_numeric_timestamp():
    with pytest.raises(ValidationError) as exc_info:
        build_seed_documents([RAW_VIDEO, dict(RAW_VIDEO, id="v-002", published_at=1_700_000_000)], now=NOW)

    assert "record 1" in exc_info.value.message


def test_seed_command_numeric_timestamp_keeps_catalog(tmp_path, seed_database):
    seed_database["videos"].insert_one({"id": "old", "title": "Old", "channel": "Old", "type": "video"})
    data_file = tmp_path / "videos.json"
    data_file.write_text(json.dumps([dict(RAW_VIDEO, published_at=1_700_000_000)]), encoding="utf-8")

    assert seed.main([str(data_file)]) == 1
    assert [doc["id"] for doc in seed_database["videos"].find({})] == ["old"]


def test_build_rejects_wrong_value_types():
    with pytest.raises(ValidationError):
        build_seed_documents([dict(RAW_VIDEO, isVerified="yes")], now=NOW)


def test_seed_command_runs_without_signing_secret(tmp_path, seed_database, monkeypatch):
    """Seeding never signs tokens, so an unset SECRET_KEY doesn't block it."""
    monkeypatch.setattr(settings, "SECRET_KEY", "")
    monkeypatch.setattr(settings, "ISSUE_ACCESS_TOKENS", True)
    data_file = tmp_path / "videos.json"
    data_file.write_text(json.dumps([RAW_VIDEO]), encoding="utf-8")

    assert seed.main([str(data_file)]) == 0
    assert seed_database["videos"].count_documents({}) == 1
