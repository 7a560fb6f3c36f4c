"""Services package - service class exports."""

from app.services.content import ContentAssembler, PublishService
from app.services.knowledge import ContextService, KnowledgeBaseBuilder
from app.services.leads import LeadLedger

__all__ = [
    "ContentAssembler",
    "ContextService",
    "KnowledgeBaseBuilder",
    "LeadLedger",
    "PublishService",
]
