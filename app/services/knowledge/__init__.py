"""Knowledge services - knowledge base text and assistant context."""

from app.services.knowledge.builder import KnowledgeBaseBuilder
from app.services.knowledge.context import ContextService

__all__ = [
    "KnowledgeBaseBuilder",
    "ContextService",
]
