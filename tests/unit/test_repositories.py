"""Tests for repository write behavior."""

import duckdb
import pytest

from app.repositories.content import ContentCacheRepository, ContentRepository


class FlakyCacheRepository(ContentCacheRepository):
    """Fails the first writes as if another cursor held the same key."""

    def __init__(self, store, conflicts, error):
        super().__init__(store)
        self.conflicts = conflicts
        self.error = error
        self.attempts = 0

    def execute(self, query, params=None):
        if query.lstrip().startswith("INSERT"):
            self.attempts += 1
            if self.attempts <= self.conflicts:
                raise self.error("Duplicate key \"lang: en\" violates primary key constraint")
        super().execute(query, params)


class TestWriteConflicts:
    @pytest.mark.parametrize("error", [duckdb.ConstraintException, duckdb.TransactionException])
    def test_conflict_retried(self, store, error):
        repo = FlakyCacheRepository(store, conflicts=2, error=error)
        repo.put("en", {"hero": {"title": "ORBIT"}})
        assert repo.attempts == 3
        assert repo.get("en").data == {"hero": {"title": "ORBIT"}}

    def test_persistent_conflict_raised(self, store):
        repo = FlakyCacheRepository(store, conflicts=10, error=duckdb.ConstraintException)
        with pytest.raises(duckdb.ConstraintException):
            repo.put("en", {})
        assert repo.attempts == 5


class TestContentRepository:
    def test_languages(self, store):
        repo = ContentRepository(store)
        assert repo.languages() == []
        repo.seed("en", {"hero": {"title": "A"}})
        repo.seed("bn", {"hero": {"title": "B"}})
        assert repo.languages() == ["bn", "en"]

    def test_seed_keeps_existing_unless_overwrite(self, store):
        repo = ContentRepository(store)
        repo.upsert_section("hero", "en", {"title": "Edited"})
        repo.seed("en", {"hero": {"title": "Seed"}})
        assert repo.get_section("en", "hero") == {"title": "Edited"}
        repo.seed("en", {"hero": {"title": "Seed"}}, overwrite=True)
        assert repo.get_section("en", "hero") == {"title": "Seed"}
