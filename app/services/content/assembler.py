"""Content assembler - content cache first, content store on miss."""

import duckdb
from loguru import logger

from app.models.content import AssembledContent
from app.repositories.content import ContentCacheRepository, ContentRepository


class ContentAssembler:
    """Loads one language's sections through the cache tiers."""

    def __init__(self, content_repo: ContentRepository, cache_repo: ContentCacheRepository):
        self._content = content_repo
        self._cache = cache_repo

    def load(self, lang: str) -> AssembledContent:
        """Read the content cache row; fall back to a section-by-section read.

        Cache read failures degrade to the store read. Store failures
        propagate: there is no tier below the store.
        """
        try:
            entry = self._cache.get(lang)
        except duckdb.Error as e:
            logger.warning("Content cache read failed for lang={}: {}", lang, e)
            entry = None

        if entry is not None and entry.data:
            return AssembledContent(lang=lang, sections=entry.data, source="content_cache")

        logger.debug("Content cache miss: lang={}, assembling from store", lang)
        return AssembledContent(lang=lang, sections=self._content.get_sections(lang), source="content_store")
