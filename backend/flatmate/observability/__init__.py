"""Observability package for the FlatMate backend."""

from flatmate.observability.metrics import (
    increment_active_chat_turns,
    decrement_active_chat_turns,
    observe_request_latency,
    observe_llm_tokens,
    increment_chat_turn,
    increment_llm_fallback,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    ChatIntent,
    FallbackOperation,
)

__all__ = [
    "increment_active_chat_turns",
    "decrement_active_chat_turns",
    "observe_request_latency",
    "observe_llm_tokens",
    "increment_chat_turn",
    "increment_llm_fallback",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "ChatIntent",
    "FallbackOperation",
]
