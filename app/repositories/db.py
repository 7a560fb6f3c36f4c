"""DuckDB store handle and schema migration."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

from app.models import ALL_DDL, LEAD_ADDITIVE_COLUMNS, LEAD_INDEXES
from settings import DB_PATH


class Store:
    """Process-wide handle to the content database.

    Created once at startup and passed to every repository. Each operation
    works on its own cursor, so concurrent requests never share connection
    state.
    """

    def __init__(self, path: str = DB_PATH):
        self.path = path
        self._conn = duckdb.connect(path)
        self._lock = threading.Lock()
        logger.debug("DB connected: {}", path)

    @contextmanager
    def cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Yield a fresh cursor for one unit of work."""
        with self._lock:
            cur = self._conn.cursor()
        try:
            yield cur
        finally:
            cur.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()
        logger.debug("DB connection closed: {}", self.path)


def _column_names(cur: duckdb.DuckDBPyConnection, table: str) -> set[str]:
    rows = cur.execute(
        "SELECT column_name FROM information_schema.columns WHERE table_name = ?",
        [table],
    ).fetchall()
    return {r[0] for r in rows}


def _add_lead_columns(cur: duckdb.DuckDBPyConnection) -> None:
    """Add columns missing from leads tables created by older releases."""
    existing = _column_names(cur, "leads")
    for column, col_type in LEAD_ADDITIVE_COLUMNS.items():
        if column in existing:
            continue
        try:
            cur.execute(f"ALTER TABLE leads ADD COLUMN {column} {col_type}")
            logger.warning("Schema drift: added missing column leads.{}", column)
        except duckdb.CatalogException:
            logger.debug("Column leads.{} already exists", column)


def _create_lead_indexes(cur: duckdb.DuckDBPyConnection) -> None:
    for ddl in LEAD_INDEXES:
        try:
            cur.execute(ddl)
        except duckdb.ConstraintException as e:
            # Legacy data with duplicate emails; dedup still runs lookup-first.
            logger.warning("Unique lead email index not created: {}", e)


def migrate(store: Store) -> None:
    """Create tables and apply additive changes (idempotent)."""
    with store.cursor() as cur:
        for ddl in ALL_DDL:
            cur.execute(ddl)
        _add_lead_columns(cur)
        _create_lead_indexes(cur)
    logger.info("DB schema ready: {}", store.path)


def open_store(path: str = DB_PATH) -> Store:
    """Open the store and run the startup migration."""
    store = Store(path)
    migrate(store)
    return store
