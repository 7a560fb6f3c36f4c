"""Content repositories - store, content cache, gist cache."""

from app.repositories.content.cache import ContentCacheRepository
from app.repositories.content.gist import GistRepository
from app.repositories.content.section import ContentRepository

__all__ = [
    "ContentRepository",
    "ContentCacheRepository",
    "GistRepository",
]
