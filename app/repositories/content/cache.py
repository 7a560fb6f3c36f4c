"""Content cache repository - assembled content per language."""

import json
from datetime import datetime
from typing import Any

import duckdb
from loguru import logger

from app.models.content import CONTENT_CACHE_DDL, ContentCacheEntry
from app.repositories.base import BaseRepository


class ContentCacheRepository(BaseRepository):
    """Repository for the per-language content cache."""

    table_ddl = CONTENT_CACHE_DDL

    def get(self, lang: str) -> ContentCacheEntry | None:
        """Load the cached blob for a language; None on miss."""
        try:
            row = self.fetchone(
                "SELECT lang, data, updated_at FROM content_cache WHERE lang = ?",
                [lang],
            )
        except duckdb.CatalogException:
            logger.debug("content_cache table missing")
            return None

        if not row:
            return None

        try:
            data = json.loads(row[1])
        except (TypeError, json.JSONDecodeError):
            data = None
        if not isinstance(data, dict):
            logger.warning("Corrupt content cache row for lang={}, ignoring", lang)
            return None

        logger.debug("Content cache hit: lang={}", lang)
        return ContentCacheEntry(lang=row[0], data=data, updated_at=row[2])

    def put(self, lang: str, data: dict[str, Any]) -> ContentCacheEntry:
        """Replace the cached blob for a language (never a partial merge)."""
        entry = ContentCacheEntry(lang=lang, data=data, updated_at=datetime.utcnow())
        self.write(
            """
            INSERT OR REPLACE INTO content_cache (lang, data, updated_at)
            VALUES (?, ?, ?)
            """,
            [lang, json.dumps(data, ensure_ascii=False), entry.updated_at],
        )
        logger.debug("Content cache saved: lang={}, sections={}", lang, len(data))
        return entry

    def status(self) -> dict[str, datetime]:
        """Get {lang: updated_at} for every cached language."""
        try:
            rows = self.fetchall("SELECT lang, updated_at FROM content_cache ORDER BY lang")
        except duckdb.CatalogException:
            return {}
        return {r[0]: r[1] for r in rows}
