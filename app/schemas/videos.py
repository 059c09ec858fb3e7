"""
Pydantic schemas for the Video API.

Schemas define the shape of data flowing through the API. The catalog is
a document store, so the create schema checks the fields every client
relies on (id, title, channel, type) and lets anything else through to be
stored as sent.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models import VideoType


# --- Request Schemas ---

class VideoCreate(BaseModel):
    """A catalog entry as submitted by the client.

    Strict: values are stored exactly as sent, so a wrong type ("yes" for
    isVerified, 12.0 for likes) is rejected instead of being converted.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    id: str = Field(..., min_length=1)
    title: str
    channel: str
    type: VideoType

    # Display values arrive pre-formatted ("1.2M views", "2 days ago", "15:30")
    views: Optional[str] = None
    timeAgo: Optional[str] = None
    duration: Optional[str] = None

    thumbnail: Optional[str] = None
    description: Optional[str] = None
    video_url: Optional[str] = None
    channelInitial: Optional[str] = None

    # Extended fields
    channelImage: Optional[str] = None
    channelUsername: Optional[str] = None
    isVerified: Optional[bool] = None
    likes: Optional[Union[int, str]] = None
    commentCount: Optional[Union[int, str]] = None
    mp4Urls: Optional[Union[list[Any], dict[str, Any]]] = None
    manifest: Optional[str] = None
    published_at: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def reject_storage_id(cls, data):
        if isinstance(data, dict) and "_id" in data:
            raise ValueError("_id is assigned by the database and cannot be set")
        return data

    def to_document(self) -> dict:
        """Only what the client actually sent, extras included."""
        doc = self.model_dump(exclude_unset=True)
        doc.update(self.model_extra or {})
        return doc
