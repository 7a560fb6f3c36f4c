"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.content import (
    CONTENT_CACHE_DDL,
    KB_GIST_DDL,
    SITE_CONTENT_DDL,
    AssembledContent,
    ContentCacheEntry,
    ContextBundle,
    KnowledgeGist,
    PublishResult,
)
from app.models.leads import (
    LEAD_ADDITIVE_COLUMNS,
    LEAD_DDL,
    LEAD_INDEXES,
    LEAD_SEQUENCE_DDL,
    Lead,
    SubmitResult,
)

ALL_DDL = [
    # Content
    SITE_CONTENT_DDL,
    CONTENT_CACHE_DDL,
    KB_GIST_DDL,
    # Leads
    LEAD_SEQUENCE_DDL,
    LEAD_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Content
    "SITE_CONTENT_DDL",
    "CONTENT_CACHE_DDL",
    "KB_GIST_DDL",
    "ContentCacheEntry",
    "KnowledgeGist",
    "AssembledContent",
    "ContextBundle",
    "PublishResult",
    # Leads
    "LEAD_SEQUENCE_DDL",
    "LEAD_DDL",
    "LEAD_ADDITIVE_COLUMNS",
    "LEAD_INDEXES",
    "Lead",
    "SubmitResult",
    # All DDL
    "ALL_DDL",
]
