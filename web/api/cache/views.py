"""Cache API views - status and publish."""

from app.container import Container

from .schemas import CacheStatusResponse, PublishResponse


def get_cache_status(container: Container) -> CacheStatusResponse:
    """Get cached languages and when each was rebuilt."""
    status = container.publisher.status()
    return CacheStatusResponse(cached=bool(status), languages=status)


def publish(container: Container) -> PublishResponse:
    """Rebuild the content cache and invalidate all gists."""
    result = container.publisher.publish()
    return PublishResponse(
        message="Cache published successfully",
        cached_at=result.published_at,
        languages=result.rebuilt_languages,
    )
