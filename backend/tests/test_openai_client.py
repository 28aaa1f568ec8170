"""
Tests for the OpenAI LLMClient adapter: every failure comes back as Err.

The AsyncOpenAI client is replaced by a stub exposing chat.completions.create.
"""

import asyncio
from types import SimpleNamespace

import httpx
import openai
import pytest

from flatmate.domain.exceptions import ExternalServiceError
from flatmate.domain.result import Err, Ok
from flatmate.infrastructure.llm import (
    AsyncCircuitBreaker,
    CircuitOpenError,
    OpenAILLMClient,
)


def _response(content, usage=None):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=usage,
    )


class StubOpenAI:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return _response(
            self.content,
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=5),
        )


def _connection_error():
    return openai.APIConnectionError(
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    )


class TestComplete:
    def test_returns_content(self):
        stub = StubOpenAI(content="Hi!")
        llm = OpenAILLMClient(client=stub, model="gpt-4o", temperature=0.7, max_tokens=500)

        result = asyncio.run(llm.complete([{"role": "user", "content": "Hello"}]))

        assert result == Ok("Hi!")
        call = stub.calls[0]
        assert call["model"] == "gpt-4o"
        assert call["temperature"] == 0.7
        assert call["max_completion_tokens"] == 500
        assert call["messages"] == [{"role": "user", "content": "Hello"}]

    def test_missing_credentials_is_err_without_call(self):
        result = asyncio.run(OpenAILLMClient(client=None, model="gpt-4o").complete([]))

        assert isinstance(result, Err)
        assert isinstance(result.error, ExternalServiceError)

    def test_provider_exception_is_err(self):
        stub = StubOpenAI(error=_connection_error())

        result = asyncio.run(OpenAILLMClient(client=stub, model="gpt-4o").complete([]))

        assert isinstance(result, Err)
        assert result.error.service == "openai"


class TestCompleteJson:
    def _run(self, content):
        stub = StubOpenAI(content=content)
        llm = OpenAILLMClient(client=stub, model="gpt-4o")
        return asyncio.run(llm.complete_json("extract")), stub

    def test_parses_object(self):
        result, stub = self._run('{"location": "Berlin", "maxPrice": 1200}')

        assert result == Ok({"location": "Berlin", "maxPrice": 1200})
        assert stub.calls[0]["response_format"] == {"type": "json_object"}

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '"Berlin"'])
    def test_malformed_or_non_object_is_err(self, content):
        result, _ = self._run(content)

        assert isinstance(result, Err)

    def test_empty_content_is_empty_object(self):
        result, _ = self._run(None)

        assert result == Ok({})


class TestCircuitBreaker:
    def test_opens_after_threshold_and_fails_fast(self):
        stub = StubOpenAI(error=_connection_error())
        breaker = AsyncCircuitBreaker(threshold=2, recovery=60)
        llm = OpenAILLMClient(client=stub, model="gpt-4o", breaker=breaker)

        async def main():
            for _ in range(3):
                await llm.complete([])

        asyncio.run(main())

        assert breaker.state == "open"
        assert len(stub.calls) == 2

    def test_non_retryable_errors_do_not_open(self):
        stub = StubOpenAI(error=ValueError("bad request"))
        breaker = AsyncCircuitBreaker(threshold=1, recovery=60)
        llm = OpenAILLMClient(client=stub, model="gpt-4o", breaker=breaker)

        asyncio.run(llm.complete([]))

        assert breaker.state == "closed"

    def test_half_open_trial_success_closes(self):
        stub = StubOpenAI(error=_connection_error())
        breaker = AsyncCircuitBreaker(threshold=1, recovery=0)
        llm = OpenAILLMClient(client=stub, model="gpt-4o", breaker=breaker)

        async def main():
            await llm.complete([])
            assert breaker.state == "open"
            stub.error = None
            stub.content = "back"
            return await llm.complete([])

        assert asyncio.run(main()) == Ok("back")
        assert breaker.state == "closed"

    def test_unreported_trial_frees_slot_after_recovery(self):
        breaker = AsyncCircuitBreaker(threshold=1, recovery=0)

        async def main():
            await breaker.record_failure(_connection_error())
            await breaker.check()  # trial request starts and never reports back
            await breaker.check()

        asyncio.run(main())

        assert breaker.state == "half_open"

    def test_unreported_trial_blocks_within_recovery(self):
        breaker = AsyncCircuitBreaker(threshold=1, recovery=60)

        async def main():
            await breaker.record_failure(_connection_error())
            breaker._opened_at -= 60
            await breaker.check()
            with pytest.raises(CircuitOpenError, match="test request in progress"):
                await breaker.check()

        asyncio.run(main())

    def test_cancelled_trial_reopens(self):
        stub = StubOpenAI(error=asyncio.CancelledError())
        breaker = AsyncCircuitBreaker(threshold=1, recovery=60)
        llm = OpenAILLMClient(client=stub, model="gpt-4o", breaker=breaker)

        async def main():
            await breaker.record_failure(_connection_error())
            breaker._opened_at -= 60
            with pytest.raises(asyncio.CancelledError):
                await llm.complete([])

        asyncio.run(main())

        assert breaker.state == "open"


class TestMaxTokens:
    def test_override_replaces_default_budget(self):
        stub = StubOpenAI(content="Analysis")
        llm = OpenAILLMClient(client=stub, model="gpt-4o", max_tokens=500)

        asyncio.run(llm.complete([], max_tokens=1000))
        asyncio.run(llm.complete([]))

        assert [c["max_completion_tokens"] for c in stub.calls] == [1000, 500]
