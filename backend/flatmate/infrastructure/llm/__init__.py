from flatmate.infrastructure.llm.openai_client import (
    AsyncCircuitBreaker,
    CircuitOpenError,
    OpenAILLMClient,
)

__all__ = ["AsyncCircuitBreaker", "CircuitOpenError", "OpenAILLMClient"]
