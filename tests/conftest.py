"""Shared fixtures: in-memory store, container, fake outbound clients."""

import pytest

from app.container import Container
from app.repositories.db import open_store

SITE = "https://orbit.test"
LANGUAGES = ["en", "bn"]


class FakeSummarizer:
    """Records calls; returns ``result`` (None simulates any failure)."""

    def __init__(self, result: str | None = "GIST"):
        self.result = result
        self.calls: list[str] = []

    async def summarize(self, text: str) -> str | None:
        self.calls.append(text)
        return self.result


class FakeNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[str] = []

    async def send_welcome(self, email: str) -> bool:
        self.sent.append(email)
        if self.fail:
            raise RuntimeError("mail provider down")
        return True


@pytest.fixture
def store():
    store = open_store(":memory:")
    yield store
    store.close()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def container(store, summarizer):
    return Container(store, summarizer=summarizer, languages=LANGUAGES, site_base_url=SITE)


@pytest.fixture
def sample_content():
    return {
        "hero": {"title": "ORBIT SaaS", "tagline": "We build products", "subtitle": "Ship faster"},
        "projects": {
            "items": [
                {"id": "a1", "title": "Alpha", "desc": "CRM platform", "tags": ["React", "Node"]},
                {"title": "Beta", "desc": "Mobile app"},
            ]
        },
        "services": {"items": [{"title": "Web Apps", "desc": "Full-stack builds"}]},
        "chatbot": {
            "systemPrompt": "You are ORBIT's assistant.",
            "qaPairs": [{"question": "Pricing?", "answer": "Contact us."}],
        },
    }


@pytest.fixture
def seeded(container, sample_content):
    """Store holds sample_content for en and a smaller set for bn."""
    container.content_repo.seed("en", sample_content)
    container.content_repo.seed("bn", {"hero": {"title": "ORBIT BN"}})
    return container


@pytest.fixture
def file_store(tmp_path):
    """File-backed store; concurrent cursors behave as separate connections."""
    store = open_store(str(tmp_path / "content.duckdb"))
    yield store
    store.close()


@pytest.fixture
def file_container(file_store, summarizer):
    return Container(file_store, summarizer=summarizer, languages=LANGUAGES, site_base_url=SITE)
