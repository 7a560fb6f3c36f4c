"""Lead services."""

from app.services.leads.ledger import DEFAULT_SOURCE, LeadLedger, normalize_email

__all__ = [
    "LeadLedger",
    "DEFAULT_SOURCE",
    "normalize_email",
]
