"""Lead repository - lead ledger storage."""

from datetime import datetime

from loguru import logger

from app.models.leads import LEAD_DDL, Lead
from app.repositories.base import BaseRepository, retry_on_conflict

_LEAD_COLUMNS = "id, email, source, name, interest, chat_summary, created_at"

# Columns a later submission may fill in.
MERGEABLE_FIELDS = ("name", "interest", "chat_summary")


class LeadRepository(BaseRepository):
    """Repository for captured leads."""

    table_ddl = LEAD_DDL

    def find_by_email(self, email: str) -> Lead | None:
        row = self.fetchone(f"SELECT {_LEAD_COLUMNS} FROM leads WHERE email = ?", [email])
        return Lead.from_row(row) if row else None

    def insert(
        self,
        email: str,
        source: str,
        name: str | None = None,
        interest: str | None = None,
        chat_summary: str | None = None,
    ) -> int:
        """Insert a new lead and return its id."""
        row = self.fetchone(
            """
            INSERT INTO leads (email, source, name, interest, chat_summary, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            RETURNING id
            """,
            [email, source, name, interest, chat_summary, datetime.utcnow()],
        )
        logger.info("Lead inserted: id={}", row[0])
        return row[0]

    @retry_on_conflict
    def update_fields(self, lead_id: int, values: dict[str, str]) -> None:
        """Set the given mergeable columns on a lead."""
        values = {k: v for k, v in values.items() if k in MERGEABLE_FIELDS}
        if not values:
            return
        assignments = ", ".join(f"{column} = ?" for column in values)
        self.execute(
            f"UPDATE leads SET {assignments} WHERE id = ?",
            [*values.values(), lead_id],
        )
        logger.debug("Lead {} updated: {}", lead_id, sorted(values))

    def list_all(self) -> list[Lead]:
        rows = self.fetchall(f"SELECT {_LEAD_COLUMNS} FROM leads ORDER BY created_at DESC, id DESC")
        return [Lead.from_row(r) for r in rows]

    def delete(self, lead_id: int) -> bool:
        """Delete a lead; False when it does not exist."""
        row = self.fetchone("SELECT COUNT(*) FROM leads WHERE id = ?", [lead_id])
        if not row[0]:
            return False
        self.execute("DELETE FROM leads WHERE id = ?", [lead_id])
        logger.info("Lead deleted: id={}", lead_id)
        return True

    def count(self) -> int:
        row = self.fetchone("SELECT COUNT(*) FROM leads")
        return int(row[0])
