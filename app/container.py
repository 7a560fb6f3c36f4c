"""Dependency container - built once per process around one store handle."""

import settings
from app.repositories.content import ContentCacheRepository, ContentRepository, GistRepository
from app.repositories.db import Store
from app.repositories.leads import LeadRepository
from app.services.content import ContentAssembler, PublishService
from app.services.knowledge import ContextService, KnowledgeBaseBuilder
from app.services.knowledge.context import Summarizer
from app.services.leads import LeadLedger
from app.services.leads.ledger import Notifier
from integrations import SummarizerClient, WelcomeMailer


class Container:
    """Holds repositories and services wired to an explicit store."""

    def __init__(
        self,
        store: Store,
        summarizer: Summarizer,
        notifier: Notifier | None = None,
        languages: list[str] | None = None,
        site_base_url: str = settings.SITE_BASE_URL,
    ):
        self.store = store
        self.languages = list(languages or settings.SUPPORTED_LANGUAGES)

        # Repositories
        self.content_repo = ContentRepository(store)
        self.cache_repo = ContentCacheRepository(store)
        self.gist_repo = GistRepository(store)
        self.lead_repo = LeadRepository(store)

        # Services (with injected repos)
        self.builder = KnowledgeBaseBuilder(site_base_url)
        self.assembler = ContentAssembler(self.content_repo, self.cache_repo)
        self.publisher = PublishService(
            content_repo=self.content_repo,
            cache_repo=self.cache_repo,
            gist_repo=self.gist_repo,
            languages=self.languages,
        )
        self.context = ContextService(
            assembler=self.assembler,
            gist_repo=self.gist_repo,
            lead_repo=self.lead_repo,
            builder=self.builder,
            summarizer=summarizer,
        )
        self.leads = LeadLedger(self.lead_repo, notifier=notifier)

    @classmethod
    def from_settings(cls, store: Store) -> "Container":
        """Wire outbound clients from environment settings."""
        summarizer = SummarizerClient(
            url=settings.SUMMARIZER_API_URL,
            api_key=settings.SUMMARIZER_API_KEY,
            model=settings.SUMMARIZER_MODEL,
            timeout=settings.SUMMARIZER_TIMEOUT,
            target_words=settings.GIST_TARGET_WORDS,
        )
        mailer = WelcomeMailer(
            url=settings.MAIL_API_URL,
            api_key=settings.MAIL_API_KEY,
            sender=settings.MAIL_FROM,
            timeout=settings.MAIL_TIMEOUT,
        )
        return cls(store, summarizer=summarizer, notifier=mailer)
