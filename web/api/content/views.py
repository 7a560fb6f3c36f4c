"""Content API views - website content read and section write."""

import hashlib
import json

from app.container import Container
from web.api.errors import ValidationError, validate_lang

from .schemas import ContentResponse, SectionRequest, SuccessResponse


def content_etag(content: dict) -> str:
    """Strong ETag over the canonical JSON form of the content."""
    digest = hashlib.sha1(json.dumps(content, sort_keys=True, ensure_ascii=False).encode("utf-8"))
    return f'"{digest.hexdigest()[:16]}"'


def get_content(container: Container, lang: str) -> tuple[ContentResponse, str]:
    """Get assembled content and its ETag."""
    validate_lang(lang, container.languages)
    assembled = container.assembler.load(lang)
    return ContentResponse(content=assembled.sections, lang=lang), content_etag(assembled.sections)


def save_section(container: Container, body: SectionRequest) -> SuccessResponse:
    """Upsert one section; visible to cached readers after the next publish."""
    if not body.section or not body.lang or body.data is None:
        raise ValidationError("Missing section, lang, or data")
    validate_lang(body.lang, container.languages)

    container.content_repo.upsert_section(body.section, body.lang, body.data)
    return SuccessResponse()
