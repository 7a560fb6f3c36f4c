"""Context API."""

from web.api.context.views import get_context

__all__ = [
    "get_context",
]
