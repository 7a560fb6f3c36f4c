"""Leads API views - capture, list, delete."""

from app.container import Container
from web.api.errors import NotFoundError, ValidationError, validate_email

from .schemas import LeadItem, LeadsResponse, LeadSubmitRequest, MessageResponse


async def submit_lead(container: Container, body: LeadSubmitRequest) -> MessageResponse:
    """Capture a lead or enrich the existing one."""
    validate_email(body.email)
    result = await container.leads.submit(
        body.email,
        source=body.source,
        name=body.name,
        interest=body.interest,
        chat_summary=body.chat_summary,
    )
    if result.created:
        return MessageResponse(message="Lead captured successfully")
    return MessageResponse(message="Lead already captured, updated")


def list_leads(container: Container) -> LeadsResponse:
    """List leads, newest first."""
    leads = container.leads.list_leads()
    return LeadsResponse(leads=[LeadItem(**lead.to_dict()) for lead in leads])


def delete_lead(container: Container, lead_id: str | None) -> MessageResponse:
    """Delete one lead by id."""
    if not lead_id:
        raise ValidationError("Lead ID required")
    try:
        parsed = int(lead_id)
    except ValueError:
        raise ValidationError(f"Invalid lead ID: {lead_id}") from None

    if not container.leads.delete(parsed):
        raise NotFoundError(f"Lead {parsed} not found")
    return MessageResponse(message="Lead deleted")
