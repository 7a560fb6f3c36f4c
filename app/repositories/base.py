"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random

from app.repositories.db import Store

# Raised when concurrent cursors write the same key; the later writer may retry.
WRITE_CONFLICTS = (duckdb.ConstraintException, duckdb.TransactionException)


def _run(cur: duckdb.DuckDBPyConnection, query: str, params: list | None) -> duckdb.DuckDBPyConnection:
    if params:
        return cur.execute(query, params)
    return cur.execute(query)


def _log_conflict(retry_state) -> None:
    logger.debug(
        "Write conflict, retrying (attempt {}): {}",
        retry_state.attempt_number,
        retry_state.outcome.exception(),
    )


# Retry policy for idempotent upserts racing on the same key.
retry_on_conflict = retry(
    retry=retry_if_exception_type(WRITE_CONFLICTS),
    stop=stop_after_attempt(5),
    wait=wait_random(min=0.01, max=0.1),
    before_sleep=_log_conflict,
    reraise=True,
)


class BaseRepository:
    """Base repository with common functionality."""

    # DDL used to recreate the backing table when a write finds it missing.
    table_ddl: str | None = None

    def __init__(self, store: Store):
        self._store = store
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> None:
        """Execute a write statement."""
        with self._store.cursor() as cur:
            _run(cur, query, params)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        with self._store.cursor() as cur:
            return _run(cur, query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        with self._store.cursor() as cur:
            return _run(cur, query, params).fetchone()

    def ensure_table(self) -> None:
        """Create the backing table if it does not exist."""
        if self.table_ddl:
            self.execute(self.table_ddl)

    @retry_on_conflict
    def write(self, query: str, params: list | None = None) -> None:
        """Execute an idempotent upsert.

        Recreates the backing table once if it is gone; a conflict with a
        concurrent writer of the same key is retried.
        """
        try:
            self.execute(query, params)
        except duckdb.CatalogException:
            if not self.table_ddl:
                raise
            logger.warning("{}: backing table missing, recreating", self.__class__.__name__)
            self.ensure_table()
            self.execute(query, params)
