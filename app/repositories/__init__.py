"""Repositories package - data access layer for the content database."""

from app.repositories.base import BaseRepository
from app.repositories.content import ContentCacheRepository, ContentRepository, GistRepository
from app.repositories.db import Store, migrate, open_store
from app.repositories.leads import LeadRepository

__all__ = [
    # DB
    "Store",
    "migrate",
    "open_store",
    # Base
    "BaseRepository",
    # Content
    "ContentRepository",
    "ContentCacheRepository",
    "GistRepository",
    # Leads
    "LeadRepository",
]
