"""Leads API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class LeadSubmitRequest(BaseModel):
    """Lead capture payload."""

    email: str | None = None
    source: str | None = None
    name: str | None = None
    interest: str | None = None
    chat_summary: str | None = Field(alias="chatSummary", default=None)

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    """Acknowledgement with a message."""

    success: bool = True
    message: str


class LeadItem(BaseModel):
    """Stored lead."""

    id: int
    email: str
    source: str | None
    name: str | None
    interest: str | None
    chat_summary: str | None = Field(alias="chatSummary")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        populate_by_name = True


class LeadsResponse(BaseModel):
    """Lead list."""

    success: bool = True
    leads: list[LeadItem]
