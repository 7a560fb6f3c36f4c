"""Lead repositories."""

from app.repositories.leads.lead import MERGEABLE_FIELDS, LeadRepository

__all__ = [
    "LeadRepository",
    "MERGEABLE_FIELDS",
]
