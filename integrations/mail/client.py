"""Transactional mail client - welcome message for new leads."""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from integrations.base import BaseClient, is_retryable_error
from integrations.errors import IntegrationError
from integrations.mail.templates import WELCOME_HTML, WELCOME_SUBJECT


class WelcomeMailer(BaseClient):
    """Sends the welcome mail through the Resend HTTP API."""

    def __init__(
        self,
        url: str,
        api_key: str | None,
        sender: str,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(url, api_key, timeout=timeout, transport=transport)
        self._sender = sender

    async def send_welcome(self, email: str) -> bool:
        """Send the welcome mail; False when disabled or failed."""
        if not self.enabled:
            logger.warning("Mail API key is not set. Skipping welcome email.")
            return False
        try:
            await self._send(
                {
                    "from": self._sender,
                    "to": email,
                    "subject": WELCOME_SUBJECT,
                    "html": WELCOME_HTML,
                }
            )
        except IntegrationError as e:
            logger.error("Welcome email failed: {}", e)
            return False
        logger.info("Welcome email sent")
        return True

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception(is_retryable_error),
        reraise=True,
    )
    async def _send(self, payload: dict) -> dict:
        """POST with retry on network errors and 5xx."""
        return await self._post(payload)
