"""Base HTTP client for outbound JSON APIs."""

import httpx
from loguru import logger

from integrations.errors import ConfigurationError, TransientUpstreamError


def is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    return isinstance(exc, TransientUpstreamError) and exc.retryable


class BaseClient:
    """Async client posting JSON to a single bearer-authenticated endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str | None,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        if not api_key:
            logger.warning("{}: no API key configured, client disabled", self.__class__.__name__)

    @property
    def enabled(self) -> bool:
        return bool(self._api_key and self._url)

    async def _post(self, payload: dict) -> dict:
        """POST JSON and return the decoded body."""
        if not self.enabled:
            raise ConfigurationError(f"{self.__class__.__name__} is not configured")

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(self._url, json=payload, headers=headers)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransientUpstreamError(f"HTTP {status} from upstream", retryable=status >= 500) from e
        except (httpx.TransportError, httpx.TimeoutException) as e:
            raise TransientUpstreamError(f"{type(e).__name__}: {e}", retryable=True) from e
        except ValueError as e:
            raise TransientUpstreamError(f"Invalid JSON body: {e}") from e
