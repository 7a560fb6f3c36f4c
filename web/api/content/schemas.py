"""Content API schemas."""

from typing import Any

from pydantic import BaseModel


class ContentResponse(BaseModel):
    """Assembled content for the website renderer."""

    success: bool = True
    content: dict[str, Any]
    lang: str


class SectionRequest(BaseModel):
    """One section written by the admin path."""

    section: str | None = None
    lang: str | None = None
    data: Any = None


class SuccessResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = True
