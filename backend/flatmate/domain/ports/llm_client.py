"""
LLM Client Port - Interface for the conversational LLM provider.
Implementation: flatmate/infrastructure/llm/openai_client.py

Failures are values, not exceptions: every method returns Err(ExternalServiceError)
instead of raising, so callers branch explicitly into their fallback path.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from flatmate.domain.exceptions.external_service_error import ExternalServiceError
from flatmate.domain.result import Result


class LLMClient(ABC):
    @abstractmethod
    async def complete(
        self, messages: list[dict[str, str]], max_tokens: Optional[int] = None
    ) -> Result[str, ExternalServiceError]: ...

    @abstractmethod
    async def complete_json(
        self, prompt: str
    ) -> Result[dict[str, Any], ExternalServiceError]: ...
