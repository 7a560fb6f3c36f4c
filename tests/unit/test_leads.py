"""Tests for the lead ledger."""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import duckdb
import pytest

from app.repositories.db import Store, migrate
from app.repositories.leads import LeadRepository
from app.services.leads import LeadLedger, normalize_email


class RacingLeadRepository(LeadRepository):
    """First lookup misses as if another request inserted concurrently."""

    def __init__(self, store):
        super().__init__(store)
        self.raced = False

    def find_by_email(self, email):
        if not self.raced:
            self.raced = True
            return None
        return super().find_by_email(email)


class LaggingLeadRepository(LeadRepository):
    """Another writer wins the insert; its row shows up only after a few lookups."""

    def __init__(self, store, error, hidden_lookups=3):
        super().__init__(store)
        self.error = error
        self.hidden_lookups = hidden_lookups
        self.lookups = 0
        self.winner_inserted = False

    def find_by_email(self, email):
        self.lookups += 1
        if self.lookups <= self.hidden_lookups:
            return None
        return super().find_by_email(email)

    def insert(self, email, source, **values):
        if not self.winner_inserted:
            self.winner_inserted = True
            super().insert(email, "chatbot")
        raise self.error("Failed to commit: PRIMARY KEY or UNIQUE constraint violation")


def _submit(ledger, email, **fields):
    return asyncio.run(ledger.submit(email, **fields))


class TestDedup:
    def test_create_then_merge(self, container):
        first = _submit(container.leads, "x@y.com")
        second = _submit(container.leads, "x@y.com", interest="pricing")
        assert first.created is True
        assert second.created is False
        assert second.lead_id == first.lead_id

        leads = container.leads.list_leads()
        assert len(leads) == 1
        assert leads[0].interest == "pricing"

    def test_merge_does_not_clobber(self, container):
        _submit(container.leads, "x@y.com", name="Ada", interest="pricing")
        _submit(container.leads, "x@y.com", name="  ", interest=None, chat_summary="asked about MVPs")
        lead = container.lead_repo.find_by_email("x@y.com")
        assert lead.name == "Ada"
        assert lead.interest == "pricing"
        assert lead.chat_summary == "asked about MVPs"

    def test_source_keeps_first_touch(self, container):
        _submit(container.leads, "x@y.com", source="chatbot")
        _submit(container.leads, "x@y.com", source="footer")
        assert container.lead_repo.find_by_email("x@y.com").source == "chatbot"

    def test_default_source(self, container):
        _submit(container.leads, "x@y.com")
        assert container.lead_repo.find_by_email("x@y.com").source == "website"

    def test_email_normalized(self, container):
        _submit(container.leads, "  X@Y.com ")
        result = _submit(container.leads, "x@y.COM")
        assert result.created is False
        assert container.leads.count() == 1
        assert container.leads.list_leads()[0].email == "x@y.com"

    def test_normalize_email(self):
        assert normalize_email(" Foo@Bar.COM ") == "foo@bar.com"

    def test_concurrent_insert_merges(self, store):
        repo = RacingLeadRepository(store)
        repo.insert("x@y.com", "website")
        result = _submit(LeadLedger(repo), "x@y.com", interest="pricing")
        assert result.created is False
        assert LeadRepository(store).find_by_email("x@y.com").interest == "pricing"

    @pytest.mark.parametrize("error", [duckdb.ConstraintException, duckdb.TransactionException])
    def test_lost_race_waits_for_winner(self, store, error):
        repo = LaggingLeadRepository(store, error)
        result = _submit(LeadLedger(repo), "x@y.com", interest="pricing")
        assert result.created is False
        lead = LeadRepository(store).find_by_email("x@y.com")
        assert lead.interest == "pricing"
        assert lead.source == "chatbot"
        assert repo.lookups == 4

    def test_winner_never_visible_raises(self, store):
        repo = LaggingLeadRepository(store, duckdb.TransactionException, hidden_lookups=100)
        with pytest.raises(duckdb.TransactionException):
            _submit(LeadLedger(repo), "x@y.com")


class TestConcurrentSubmit:
    def test_same_emails_from_many_threads(self, file_container):
        emails = [f"u{i}@y.com" for i in range(30)]

        def submit(email):
            return asyncio.run(file_container.leads.submit(email, interest="pricing"))

        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(submit, email) for email in emails for _ in range(4)]
            results = [f.result() for f in futures]

        assert sum(r.created for r in results) == len(emails)
        assert file_container.leads.count() == len(emails)
        assert {r.lead_id for r in results} == {lead.id for lead in file_container.leads.list_leads()}

    def test_store_calls_leave_the_event_loop(self, container, monkeypatch):
        threads = []
        find = container.lead_repo.find_by_email

        def recording_find(email):
            threads.append(threading.get_ident())
            return find(email)

        monkeypatch.setattr(container.lead_repo, "find_by_email", recording_find)

        async def run():
            await container.leads.submit("x@y.com")
            return threading.get_ident()

        loop_thread = asyncio.run(run())
        assert threads
        assert loop_thread not in threads


class TestWelcomeNotification:
    def _submit_and_settle(self, ledger, email):
        async def run():
            result = await ledger.submit(email)
            await asyncio.sleep(0)
            await asyncio.sleep(0)
            return result

        return asyncio.run(run())

    def test_sent_on_create_only(self, container, notifier):
        ledger = LeadLedger(container.lead_repo, notifier=notifier)
        self._submit_and_settle(ledger, "x@y.com")
        self._submit_and_settle(ledger, "x@y.com")
        assert notifier.sent == ["x@y.com"]

    def test_failure_does_not_affect_result(self, container, notifier):
        notifier.fail = True
        ledger = LeadLedger(container.lead_repo, notifier=notifier)
        result = self._submit_and_settle(ledger, "x@y.com")
        assert result.created is True
        assert notifier.sent == ["x@y.com"]
        assert container.leads.count() == 1


class TestLedgerAdmin:
    def test_list_newest_first(self, container):
        _submit(container.leads, "first@y.com")
        _submit(container.leads, "second@y.com")
        emails = [lead.email for lead in container.leads.list_leads()]
        assert emails == ["second@y.com", "first@y.com"]

    def test_delete(self, container):
        result = _submit(container.leads, "x@y.com")
        assert container.leads.delete(result.lead_id) is True
        assert container.leads.delete(result.lead_id) is False
        assert container.leads.count() == 0


class TestLegacySchema:
    @pytest.fixture
    def legacy_store(self):
        store = Store(":memory:")
        with store.cursor() as cur:
            cur.execute("CREATE SEQUENCE leads_id_seq START 1")
            cur.execute(
                """
                CREATE TABLE leads (
                    id BIGINT DEFAULT nextval('leads_id_seq'),
                    email VARCHAR NOT NULL,
                    source VARCHAR,
                    name VARCHAR,
                    created_at TIMESTAMP NOT NULL
                )
                """
            )
            cur.execute("INSERT INTO leads (email, source, created_at) VALUES ('old@y.com', 'website', current_timestamp)")
        yield store
        store.close()

    def test_columns_added(self, legacy_store):
        migrate(legacy_store)
        with legacy_store.cursor() as cur:
            columns = {
                r[0]
                for r in cur.execute(
                    "SELECT column_name FROM information_schema.columns WHERE table_name = 'leads'"
                ).fetchall()
            }
        assert {"interest", "chat_summary"} <= columns

    def test_existing_rows_kept_and_mergeable(self, legacy_store):
        migrate(legacy_store)
        ledger = LeadLedger(LeadRepository(legacy_store))
        result = _submit(ledger, "old@y.com", interest="pricing")
        assert result.created is False
        assert LeadRepository(legacy_store).find_by_email("old@y.com").interest == "pricing"

    def test_migration_idempotent(self, legacy_store):
        migrate(legacy_store)
        migrate(legacy_store)
        assert LeadRepository(legacy_store).count() == 1
