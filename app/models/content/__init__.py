"""Content domain models - site sections, content cache, knowledge gists."""

from app.models.content.cache import CONTENT_CACHE_DDL
from app.models.content.entities import (
    AssembledContent,
    ContentCacheEntry,
    ContextBundle,
    KnowledgeGist,
    PublishResult,
)
from app.models.content.gist import KB_GIST_DDL
from app.models.content.section import SITE_CONTENT_DDL

__all__ = [
    "SITE_CONTENT_DDL",
    "CONTENT_CACHE_DDL",
    "KB_GIST_DDL",
    "ContentCacheEntry",
    "KnowledgeGist",
    "AssembledContent",
    "ContextBundle",
    "PublishResult",
]
