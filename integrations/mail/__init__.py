"""Mail client - lead notifications."""

from integrations.mail.client import WelcomeMailer

__all__ = [
    "WelcomeMailer",
]
