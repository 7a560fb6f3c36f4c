"""Gist repository - cached knowledge base summaries."""

from datetime import datetime

import duckdb
from loguru import logger

from app.models.content import KB_GIST_DDL, KnowledgeGist
from app.repositories.base import BaseRepository, retry_on_conflict


class GistRepository(BaseRepository):
    """Repository for per-language knowledge gists.

    Absence of a row is the only invalidation signal; a missing table reads
    as a miss and deletes against it are no-ops.
    """

    table_ddl = KB_GIST_DDL

    def get(self, lang: str) -> KnowledgeGist | None:
        try:
            row = self.fetchone(
                "SELECT lang, gist, updated_at FROM kb_gist WHERE lang = ?",
                [lang],
            )
        except duckdb.CatalogException:
            logger.debug("kb_gist table missing")
            return None
        if row:
            logger.debug("Gist hit: lang={}", lang)
            return KnowledgeGist.from_row(row)
        return None

    def set(self, lang: str, gist: str) -> KnowledgeGist:
        entry = KnowledgeGist(lang=lang, gist=gist, updated_at=datetime.utcnow())
        self.write(
            "INSERT OR REPLACE INTO kb_gist (lang, gist, updated_at) VALUES (?, ?, ?)",
            [lang, gist, entry.updated_at],
        )
        logger.info("Gist saved: lang={}, {} chars", lang, len(gist))
        return entry

    @retry_on_conflict
    def delete(self, lang: str) -> None:
        try:
            self.execute("DELETE FROM kb_gist WHERE lang = ?", [lang])
        except duckdb.CatalogException:
            return

    @retry_on_conflict
    def clear(self) -> None:
        """Drop every gist."""
        try:
            self.execute("DELETE FROM kb_gist")
        except duckdb.CatalogException:
            logger.debug("kb_gist table missing, nothing to clear")
            return
        logger.info("All gists cleared")
