"""Publish service - rebuilds the content cache and invalidates gists."""

import threading
from datetime import datetime

from loguru import logger

from app.models.content import PublishResult
from app.repositories.content import ContentCacheRepository, ContentRepository, GistRepository


class PublishService:
    """Explicit, administrator-triggered cache rebuild."""

    def __init__(
        self,
        content_repo: ContentRepository,
        cache_repo: ContentCacheRepository,
        gist_repo: GistRepository,
        languages: list[str],
    ):
        self._content = content_repo
        self._cache = cache_repo
        self._gists = gist_repo
        self._languages = list(languages)
        self._lock = threading.Lock()

    def publish(self) -> PublishResult:
        """Rebuild every supported language, then clear all gists.

        Each language row is replaced atomically on its own; languages are
        not rebuilt as one transaction, so a reader may briefly see one
        language rebuilt and another not. A failure stops the run and
        propagates after the languages already rebuilt. Runs within this
        process are serialized.
        """
        rebuilt = []
        with self._lock:
            for lang in self._languages:
                sections = self._content.get_sections(lang)
                self._cache.put(lang, sections)
                self._gists.delete(lang)
                rebuilt.append(lang)
                logger.info("Rebuilt content cache: lang={}, sections={}", lang, len(sections))

            self._gists.clear()
        result = PublishResult(rebuilt_languages=rebuilt, published_at=datetime.utcnow())
        logger.info("Publish complete: {}", ", ".join(rebuilt))
        return result

    def status(self) -> dict[str, datetime]:
        """Get {lang: updated_at} of the content cache."""
        return self._cache.status()
