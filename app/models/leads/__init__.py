"""Lead domain models."""

from app.models.leads.entities import Lead, SubmitResult
from app.models.leads.lead import LEAD_ADDITIVE_COLUMNS, LEAD_DDL, LEAD_INDEXES, LEAD_SEQUENCE_DDL

__all__ = [
    "LEAD_SEQUENCE_DDL",
    "LEAD_DDL",
    "LEAD_ADDITIVE_COLUMNS",
    "LEAD_INDEXES",
    "Lead",
    "SubmitResult",
]
