"""Leads API."""

from web.api.leads.views import delete_lead, list_leads, submit_lead

__all__ = [
    "submit_lead",
    "list_leads",
    "delete_lead",
]
