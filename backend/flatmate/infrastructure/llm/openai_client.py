"""
OpenAI implementation of the LLMClient port (async).

Uses AsyncOpenAI so LLM calls don't hold the event loop. Every failure is
returned as Err(ExternalServiceError), never raised:

    result = await llm.complete([{"role": "user", "content": "Hello"}])
    if isinstance(result, Ok):
        print(result.value)
"""

import asyncio
import json
import logging
import time
from typing import Any, Optional

from httpx import Timeout
from langsmith import traceable
from openai import (
    AsyncOpenAI,
    APIConnectionError,
    APITimeoutError,
    InternalServerError,
    RateLimitError,
)

from flatmate.domain.exceptions.external_service_error import ExternalServiceError
from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.result import Err, Ok, Result
from flatmate.observability.metrics import (
    MetricsErrorType,
    increment_error,
    observe_llm_tokens,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "openai"

_RETRYABLE = (APIConnectionError, APITimeoutError, InternalServerError, RateLimitError)


class CircuitOpenError(Exception):
    """LLM provider is down, fail fast."""

    pass


class AsyncCircuitBreaker:
    """CLOSED → (N failures) → OPEN → (cooldown) → HALF_OPEN → (1 test) → CLOSED."""

    def __init__(self, threshold: int = 5, recovery: int = 30):
        self._threshold = threshold
        self._recovery = recovery
        self._failures = 0
        self._opened_at: float = 0.0
        self._trial_started_at: float = 0.0
        self._state = "closed"
        self._lock = asyncio.Lock()

    @property
    def state(self) -> str:
        return self._state

    async def check(self) -> None:
        async with self._lock:
            if self._state == "closed":
                return
            if self._state == "open":
                if time.monotonic() - self._opened_at >= self._recovery:
                    self._state = "half_open"
                    self._trial_started_at = time.monotonic()
                    logger.info("[CircuitBreaker] OPEN → HALF_OPEN (allowing one test request)")
                    return
                raise CircuitOpenError(f"LLM circuit open ({self._failures} failures)")
            # half_open: one test request at a time; a trial that never
            # reported back frees the slot after another recovery period
            if time.monotonic() - self._trial_started_at >= self._recovery:
                self._trial_started_at = time.monotonic()
                logger.warning("[CircuitBreaker] stale HALF_OPEN trial, allowing a new one")
                return
            raise CircuitOpenError("LLM circuit half-open, test request in progress")

    async def record_success(self) -> None:
        async with self._lock:
            if self._state == "half_open":
                logger.info("[CircuitBreaker] HALF_OPEN → CLOSED")
            self._failures = 0
            self._state = "closed"

    async def record_failure(self, error: BaseException) -> None:
        async with self._lock:
            # any failed trial reopens, whatever the error type
            if self._state == "half_open":
                self._state = "open"
                self._opened_at = time.monotonic()
                logger.warning(
                    "[CircuitBreaker] HALF_OPEN → OPEN (trial failed: %s)",
                    type(error).__name__,
                )
                return
            if not isinstance(error, _RETRYABLE):
                return
            self._failures += 1
            if self._failures >= self._threshold:
                self._state = "open"
                self._opened_at = time.monotonic()
                logger.warning("[CircuitBreaker] → OPEN (%d failures)", self._failures)


def get_content(response) -> Optional[str]:
    """Extract text content from response."""
    if response.choices and response.choices[0].message:
        return response.choices[0].message.content
    return None


class OpenAILLMClient(LLMClient):
    def __init__(
        self,
        client: Optional[AsyncOpenAI],
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 500,
        json_max_tokens: int = 200,
        timeout: Optional[Timeout] = None,
        breaker: Optional[AsyncCircuitBreaker] = None,
    ):
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._json_max_tokens = json_max_tokens
        self._timeout = timeout or Timeout(40.0, connect=10.0)
        self._breaker = breaker or AsyncCircuitBreaker()

    @classmethod
    def from_config(cls, config) -> "OpenAILLMClient":
        """Build from settings; a missing API key yields a client that always returns Err."""
        client = None
        if config.OPENAI_KEY:
            client = AsyncOpenAI(
                api_key=config.OPENAI_KEY,
                max_retries=config.LLM_MAX_RETRIES,
            )
        else:
            logger.warning("[LLM] OPENAI_API_KEY not set, chat will use fallback replies")
        return cls(
            client=client,
            model=config.OPENAI_MODEL,
            temperature=config.OPENAI_TEMPERATURE,
            max_tokens=config.CHAT_MAX_TOKENS,
            json_max_tokens=config.EXTRACTION_MAX_TOKENS,
            timeout=Timeout(config.LLM_TIMEOUT, connect=config.LLM_CONNECT_TIMEOUT),
            breaker=AsyncCircuitBreaker(
                config.LLM_CB_FAILURE_THRESHOLD, config.LLM_CB_RECOVERY_TIMEOUT
            ),
        )

    @traceable(run_type="llm", name="chat_completion")
    async def complete(
        self, messages: list[dict[str, str]], max_tokens: Optional[int] = None
    ) -> Result[str, ExternalServiceError]:
        result = await self._create(
            messages=messages,
            temperature=self._temperature,
            max_completion_tokens=max_tokens or self._max_tokens,
        )
        if isinstance(result, Err):
            return result
        return Ok(get_content(result.value) or "")

    @traceable(run_type="llm", name="chat_completion_json")
    async def complete_json(
        self, prompt: str
    ) -> Result[dict[str, Any], ExternalServiceError]:
        result = await self._create(
            messages=[{"role": "user", "content": prompt}],
            temperature=0,
            max_completion_tokens=self._json_max_tokens,
            response_format={"type": "json_object"},
        )
        if isinstance(result, Err):
            return result

        content = get_content(result.value)
        if not content:
            return Ok({})
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            return Err(ExternalServiceError(SERVICE_NAME, "malformed JSON response", e))
        if not isinstance(payload, dict):
            return Err(
                ExternalServiceError(
                    SERVICE_NAME, f"expected JSON object, got {type(payload).__name__}"
                )
            )
        return Ok(payload)

    async def _create(self, **create_kwargs) -> Result[Any, ExternalServiceError]:
        if self._client is None:
            return Err(ExternalServiceError(SERVICE_NAME, "missing API credentials"))

        try:
            await self._breaker.check()
        except CircuitOpenError as e:
            increment_error(MetricsErrorType.CIRCUIT_OPEN)
            return Err(ExternalServiceError(SERVICE_NAME, str(e), e))

        try:
            response = await self._client.chat.completions.create(
                model=self._model, timeout=self._timeout, **create_kwargs
            )
        except asyncio.CancelledError as e:
            await self._breaker.record_failure(e)
            raise
        except Exception as e:
            await self._breaker.record_failure(e)
            increment_error(MetricsErrorType.LLM_FAILED)
            logger.warning(f"[LLM] {type(e).__name__} on {self._model}: {e}")
            return Err(ExternalServiceError(SERVICE_NAME, type(e).__name__, e))

        if getattr(response, "usage", None):
            observe_llm_tokens("input", self._model, response.usage.prompt_tokens)
            observe_llm_tokens("output", self._model, response.usage.completion_tokens)

        await self._breaker.record_success()
        return Ok(response)
