"""Content domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.models.common import BaseEntity


@dataclass
class ContentCacheEntry(BaseEntity):
    """Assembled content for a language, as written by publish."""

    lang: str
    data: dict[str, Any]
    updated_at: datetime


@dataclass
class KnowledgeGist(BaseEntity):
    """Compressed knowledge base text for a language."""

    lang: str
    gist: str
    updated_at: datetime


@dataclass
class AssembledContent(BaseEntity):
    """Sections of one language plus the tier they were read from."""

    lang: str
    sections: dict[str, Any] = field(default_factory=dict)
    source: str = "content_store"


@dataclass
class ContextBundle(BaseEntity):
    """Everything the assistant needs for one language."""

    knowledge_base: str
    qa_pairs: str | None
    system_prompt: str | None
    lang: str
    source: str


@dataclass
class PublishResult(BaseEntity):
    """Outcome of a publish run."""

    rebuilt_languages: list[str]
    published_at: datetime
