"""Content API."""

from web.api.content.views import content_etag, get_content, save_section

__all__ = [
    "get_content",
    "save_section",
    "content_etag",
]
