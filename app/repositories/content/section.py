"""Content store repository - per (section, lang) source records."""

import json
from datetime import datetime
from typing import Any

from loguru import logger

from app.models.content import SITE_CONTENT_DDL
from app.repositories.base import BaseRepository


class ContentRepository(BaseRepository):
    """Repository for the source-of-truth site content."""

    table_ddl = SITE_CONTENT_DDL

    def get_sections(self, lang: str) -> dict[str, Any]:
        """Assemble all sections of a language into {section: data}.

        A row whose JSON cannot be parsed is skipped so one bad record does
        not take the whole language down.
        """
        rows = self.fetchall(
            "SELECT section, data FROM site_content WHERE lang = ? ORDER BY section",
            [lang],
        )
        sections: dict[str, Any] = {}
        for section, raw in rows:
            try:
                sections[section] = json.loads(raw)
            except (TypeError, json.JSONDecodeError) as e:
                logger.warning("Skipping corrupt section: lang={}, section={} ({})", lang, section, e)
        logger.debug("get_sections({}): {} sections", lang, len(sections))
        return sections

    def get_section(self, lang: str, section: str) -> Any | None:
        """Get one section's data, or None when absent or unreadable."""
        row = self.fetchone(
            "SELECT data FROM site_content WHERE lang = ? AND section = ?",
            [lang, section],
        )
        if not row:
            return None
        try:
            return json.loads(row[0])
        except (TypeError, json.JSONDecodeError):
            logger.warning("Corrupt section: lang={}, section={}", lang, section)
            return None

    def upsert_section(self, section: str, lang: str, data: Any) -> None:
        """Insert or replace one section."""
        self.write(
            """
            INSERT OR REPLACE INTO site_content (section, lang, data, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            [section, lang, json.dumps(data, ensure_ascii=False), datetime.utcnow()],
        )
        logger.info("Section saved: lang={}, section={}", lang, section)

    def seed(self, lang: str, sections: dict[str, Any], overwrite: bool = False) -> int:
        """Bulk-load sections; existing rows are kept unless overwrite is set."""
        verb = "INSERT OR REPLACE" if overwrite else "INSERT OR IGNORE"
        now = datetime.utcnow()
        for section, data in sections.items():
            self.write(
                f"{verb} INTO site_content (section, lang, data, updated_at) VALUES (?, ?, ?, ?)",
                [section, lang, json.dumps(data, ensure_ascii=False), now],
            )
        logger.info("Seeded {} sections for lang={} (overwrite={})", len(sections), lang, overwrite)
        return len(sections)

    def languages(self) -> list[str]:
        """Languages that have at least one section."""
        rows = self.fetchall("SELECT DISTINCT lang FROM site_content ORDER BY lang")
        return [r[0] for r in rows]
