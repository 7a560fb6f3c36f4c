"""Lead ledger - dedup-on-email lead capture."""

import asyncio
from typing import Protocol

from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random

from app.models.leads import Lead, SubmitResult
from app.repositories.base import WRITE_CONFLICTS
from app.repositories.leads import LeadRepository

DEFAULT_SOURCE = "website"


class Notifier(Protocol):
    async def send_welcome(self, email: str) -> bool: ...


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _log_insert_race(retry_state) -> None:
    logger.info("Concurrent lead insert detected, looking up again (attempt {})", retry_state.attempt_number)


class LeadLedger:
    """At most one lead per email; later submissions fill in, never clobber.

    Store calls run in worker threads.
    """

    def __init__(self, lead_repo: LeadRepository, notifier: Notifier | None = None):
        self._leads = lead_repo
        self._notifier = notifier
        self._pending: set[asyncio.Task] = set()

    @retry(
        retry=retry_if_exception_type(WRITE_CONFLICTS),
        stop=stop_after_attempt(5),
        wait=wait_random(min=0.01, max=0.1),
        before_sleep=_log_insert_race,
        reraise=True,
    )
    async def _find_or_insert(
        self, email: str, source: str, values: dict[str, str]
    ) -> tuple[Lead | None, int | None]:
        """Return (existing lead, None) or (None, id of the new lead).

        Losing an insert race to another writer of the same email raises a
        write conflict, and the lookup runs again until the winner's row is
        visible.
        """
        existing = await asyncio.to_thread(self._leads.find_by_email, email)
        if existing is not None:
            return existing, None
        lead_id = await asyncio.to_thread(self._leads.insert, email, source, **values)
        return None, lead_id

    async def submit(
        self,
        email: str,
        source: str | None = None,
        name: str | None = None,
        interest: str | None = None,
        chat_summary: str | None = None,
    ) -> SubmitResult:
        """Create the lead or merge non-empty fields into the existing one."""
        email = normalize_email(email)
        values = {
            key: value.strip()
            for key, value in {"name": name, "interest": interest, "chat_summary": chat_summary}.items()
            if isinstance(value, str) and value.strip()
        }

        existing, lead_id = await self._find_or_insert(email, source or DEFAULT_SOURCE, values)
        if existing is None:
            self._schedule_welcome(email)
            return SubmitResult(created=True, lead_id=lead_id)

        await asyncio.to_thread(self._leads.update_fields, existing.id, values)
        return SubmitResult(created=False, lead_id=existing.id)

    def _schedule_welcome(self, email: str) -> None:
        """Start the welcome mail as a detached task."""
        if self._notifier is None:
            return
        task = asyncio.get_running_loop().create_task(self._notifier.send_welcome(email))
        self._pending.add(task)
        task.add_done_callback(self._welcome_done)

    def _welcome_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Welcome notification failed: {}", exc)

    def list_leads(self) -> list[Lead]:
        return self._leads.list_all()

    def delete(self, lead_id: int) -> bool:
        return self._leads.delete(lead_id)

    def count(self) -> int:
        return self._leads.count()
