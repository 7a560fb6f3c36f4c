"""Content services - assembly and publishing."""

from app.services.content.assembler import ContentAssembler
from app.services.content.publisher import PublishService

__all__ = [
    "ContentAssembler",
    "PublishService",
]
