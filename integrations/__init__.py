"""Outbound API clients package."""

from integrations.base import BaseClient, is_retryable_error
from integrations.errors import ConfigurationError, IntegrationError, TransientUpstreamError
from integrations.mail import WelcomeMailer
from integrations.summarizer import SummarizerClient

__all__ = [
    # Base
    "BaseClient",
    "is_retryable_error",
    # Errors
    "IntegrationError",
    "ConfigurationError",
    "TransientUpstreamError",
    # Clients
    "SummarizerClient",
    "WelcomeMailer",
]
