"""Context service - tiered read of the assistant's knowledge base."""

import asyncio
from typing import Protocol

import duckdb
from loguru import logger

from app.models.content import ContextBundle, KnowledgeGist
from app.repositories.content import GistRepository
from app.repositories.leads import LeadRepository
from app.services.content.assembler import ContentAssembler
from app.services.knowledge.builder import KnowledgeBaseBuilder


class Summarizer(Protocol):
    async def summarize(self, text: str) -> str | None: ...


class ContextService:
    """Answers context reads with the cheapest available tier.

    Order: gist cache, then content cache, then the raw content store. When
    no gist exists the knowledge base is built, augmented with the live lead
    count, summarized and stored as the new gist. A failed summarization
    returns the raw text and stores nothing, so the next read retries.
    """

    def __init__(
        self,
        assembler: ContentAssembler,
        gist_repo: GistRepository,
        lead_repo: LeadRepository,
        builder: KnowledgeBaseBuilder,
        summarizer: Summarizer,
    ):
        self._assembler = assembler
        self._gists = gist_repo
        self._leads = lead_repo
        self._builder = builder
        self._summarizer = summarizer

    def _cached_gist(self, lang: str) -> KnowledgeGist | None:
        try:
            return self._gists.get(lang)
        except duckdb.Error as e:
            logger.warning("Gist read failed for lang={}: {}", lang, e)
            return None

    def _lead_count(self) -> int | None:
        try:
            return self._leads.count()
        except duckdb.Error as e:
            logger.warning("Lead count unavailable: {}", e)
            return None

    def _persist_gist(self, lang: str, gist: str) -> None:
        try:
            self._gists.set(lang, gist)
        except duckdb.Error as e:
            logger.warning("Gist not persisted for lang={}: {}", lang, e)

    async def _regenerate(self, lang: str, sections: dict) -> tuple[str, str]:
        """Build, summarize and cache; returns (knowledge_base, source)."""
        live_stats = self._builder.live_stats_fragment(await asyncio.to_thread(self._lead_count))
        knowledge_base = self._builder.build(sections, live_stats=live_stats)

        gist = await self._summarizer.summarize(knowledge_base)
        if not gist:
            logger.info("No gist for lang={}, serving raw knowledge base", lang)
            return knowledge_base, "raw"

        await asyncio.to_thread(self._persist_gist, lang, gist)
        return gist, "summarized"

    async def _gist_bundle(self, lang: str, gist: KnowledgeGist) -> ContextBundle:
        """Serve a gist hit; chatbot fields come from content when readable."""
        try:
            content = await asyncio.to_thread(self._assembler.load, lang)
        except duckdb.Error as e:
            logger.warning("Content unreadable for lang={}, serving gist alone: {}", lang, e)
            sections = {}
        else:
            sections = content.sections
        return ContextBundle(
            knowledge_base=gist.gist,
            qa_pairs=self._builder.qa_pairs(sections),
            system_prompt=self._builder.system_prompt(sections),
            lang=lang,
            source="gist",
        )

    async def get_context(self, lang: str) -> ContextBundle:
        """Store reads run in worker threads; only the summarizer call is awaited inline."""
        gist = await asyncio.to_thread(self._cached_gist, lang)
        if gist is not None:
            logger.debug("Context lang={}: kb from gist", lang)
            return await self._gist_bundle(lang, gist)

        content = await asyncio.to_thread(self._assembler.load, lang)
        knowledge_base, source = await self._regenerate(lang, content.sections)

        logger.debug("Context lang={}: kb from {}, content from {}", lang, source, content.source)
        return ContextBundle(
            knowledge_base=knowledge_base,
            qa_pairs=self._builder.qa_pairs(content.sections),
            system_prompt=self._builder.system_prompt(content.sections),
            lang=lang,
            source=source,
        )
