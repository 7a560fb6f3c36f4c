"""Cache API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class CacheStatusResponse(BaseModel):
    """Content cache status."""

    success: bool = True
    cached: bool
    languages: dict[str, datetime]


class PublishResponse(BaseModel):
    """Publish outcome."""

    success: bool = True
    message: str
    cached_at: datetime = Field(alias="cachedAt")
    languages: list[str] = []

    class Config:
        populate_by_name = True
