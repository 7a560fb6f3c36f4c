"""Summarizer client - knowledge base compression."""

from integrations.summarizer.client import SummarizerClient
from integrations.summarizer.schemas import ChatChoice, ChatCompletionResponse, ChatMessage

__all__ = [
    "SummarizerClient",
    "ChatCompletionResponse",
    "ChatChoice",
    "ChatMessage",
]
