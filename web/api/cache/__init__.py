"""Cache API."""

from web.api.cache.views import get_cache_status, publish

__all__ = [
    "get_cache_status",
    "publish",
]
