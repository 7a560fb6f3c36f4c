"""Summarizer client - compresses knowledge base text into a gist."""

import asyncio

import httpx
from loguru import logger
from pydantic import ValidationError

from integrations.base import BaseClient
from integrations.errors import ConfigurationError, IntegrationError, TransientUpstreamError
from integrations.summarizer.prompts import build_messages
from integrations.summarizer.schemas import ChatCompletionResponse


class SummarizerClient(BaseClient):
    """Client for an OpenAI-compatible chat completions endpoint.

    ``summarize`` never raises: missing credentials, timeouts, non-2xx
    responses and malformed bodies all come back as None so the caller can
    fall back to the uncompressed text. Failures are not retried.
    """

    def __init__(
        self,
        url: str,
        api_key: str | None,
        model: str,
        timeout: float = 15,
        target_words: int = 150,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(url, api_key, timeout=timeout, transport=transport)
        self._model = model
        self._target_words = target_words

    async def summarize(self, text: str) -> str | None:
        """Return a compressed gist of text, or None on any failure."""
        if not text or not text.strip():
            return None
        try:
            return await asyncio.wait_for(self._summarize(text), timeout=self._timeout)
        except ConfigurationError:
            logger.debug("Summarizer disabled, using raw knowledge base")
            return None
        except asyncio.TimeoutError:
            logger.warning("Summarizer timed out after {}s", self._timeout)
            return None
        except IntegrationError as e:
            logger.warning("Summarizer failed: {}", e)
            return None
        except Exception as e:
            logger.exception("Unexpected summarizer error: {}", e)
            return None

    async def _summarize(self, text: str) -> str:
        body = await self._post(
            {
                "model": self._model,
                "messages": build_messages(text, self._target_words),
                "temperature": 0.2,
                "max_tokens": self._target_words * 3,
            }
        )
        try:
            parsed = ChatCompletionResponse.model_validate(body)
        except ValidationError as e:
            raise TransientUpstreamError(f"Malformed completion body: {e.error_count()} errors") from e

        content = (parsed.choices[0].message.content or "").strip()
        if not content:
            raise TransientUpstreamError("Empty completion")

        logger.info("Summarized {} chars into {} chars", len(text), len(content))
        return content
