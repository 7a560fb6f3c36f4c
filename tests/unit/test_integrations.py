"""Tests for the outbound summarizer and mail clients."""

import asyncio
import json

import httpx

from integrations import SummarizerClient, TransientUpstreamError, WelcomeMailer, is_retryable_error

URL = "https://llm.test/v1/chat/completions"


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _summarizer(handler, api_key="key", timeout=5):
    return SummarizerClient(
        url=URL,
        api_key=api_key,
        model="test-model",
        timeout=timeout,
        target_words=120,
        transport=httpx.MockTransport(handler),
    )


class TestSummarizer:
    def test_success_returns_stripped_content(self):
        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json=_completion("  Short gist.  "))

        assert asyncio.run(_summarizer(handler).summarize("long text")) == "Short gist."
        payload = seen[0]
        assert payload["model"] == "test-model"
        assert payload["messages"][1] == {"role": "user", "content": "long text"}
        assert "120 words" in payload["messages"][0]["content"]

    def test_sends_bearer_token(self):
        seen = []

        def handler(request):
            seen.append(request.headers["Authorization"])
            return httpx.Response(200, json=_completion("ok"))

        asyncio.run(_summarizer(handler).summarize("text"))
        assert seen == ["Bearer key"]

    def test_missing_key_makes_no_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_completion("ok"))

        assert asyncio.run(_summarizer(handler, api_key=None).summarize("text")) is None
        assert calls == []

    def test_non_2xx_returns_none(self):
        def handler(request):
            return httpx.Response(500, json={"error": "boom"})

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_malformed_body_returns_none(self):
        def handler(request):
            return httpx.Response(200, json={"unexpected": True})

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_empty_choices_returns_none(self):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_blank_content_returns_none(self):
        def handler(request):
            return httpx.Response(200, json=_completion("   "))

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_non_json_body_returns_none(self):
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_network_error_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert asyncio.run(_summarizer(handler).summarize("text")) is None

    def test_slow_upstream_times_out(self):
        async def handler(request):
            await asyncio.sleep(2)
            return httpx.Response(200, json=_completion("late"))

        assert asyncio.run(_summarizer(handler, timeout=0.05).summarize("text")) is None

    def test_empty_text_skipped(self):
        def handler(request):
            raise AssertionError("should not be called")

        assert asyncio.run(_summarizer(handler).summarize("  ")) is None


class TestRetryable:
    def test_only_flagged_errors_retry(self):
        assert is_retryable_error(TransientUpstreamError("x", retryable=True))
        assert not is_retryable_error(TransientUpstreamError("x"))
        assert not is_retryable_error(ValueError("x"))


class TestWelcomeMailer:
    def _mailer(self, handler, api_key="key"):
        return WelcomeMailer(
            url="https://mail.test/emails",
            api_key=api_key,
            sender="ORBIT <hello@orbit.test>",
            transport=httpx.MockTransport(handler),
        )

    def test_sends_to_lead(self):
        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"id": "m1"})

        assert asyncio.run(self._mailer(handler).send_welcome("a@b.com")) is True
        assert seen[0]["to"] == "a@b.com"
        assert seen[0]["from"] == "ORBIT <hello@orbit.test>"

    def test_disabled_without_key(self):
        assert asyncio.run(self._mailer(lambda r: httpx.Response(200), api_key="").send_welcome("a@b.com")) is False

    def test_client_error_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(422, json={"error": "bad address"})

        assert asyncio.run(self._mailer(handler).send_welcome("a@b.com")) is False
        assert len(calls) == 1

    def test_server_error_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(503)
            return httpx.Response(200, json={"id": "m1"})

        assert asyncio.run(self._mailer(handler).send_welcome("a@b.com")) is True
        assert len(calls) == 2
