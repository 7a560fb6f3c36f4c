"""Lead domain entities."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class Lead(BaseEntity):
    """Captured lead."""

    id: int
    email: str
    source: str | None
    name: str | None
    interest: str | None
    chat_summary: str | None
    created_at: datetime


@dataclass
class SubmitResult(BaseEntity):
    """Outcome of a lead submission."""

    created: bool
    lead_id: int | None = None
