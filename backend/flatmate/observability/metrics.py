"""
Prometheus Metrics for the FlatMate backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Gauge: Value goes up/down (chat turns in flight)
    - Counter: Value only goes up (turns by intent, fallbacks, errors)
    - Histogram: Distribution (request latency, LLM tokens)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ACTIVE_CHAT_TURNS = Gauge(
    "flatmate_active_chat_turns", "Number of chat turns currently being processed"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.1, 0.25, 0.5, 1, 2, 5, 10, 30, 60],
)

LLM_TOKENS_TOTAL = Histogram(
    "flatmate_llm_tokens_total",
    "Total number of LLM tokens used",
    ["type", "model"],
    buckets=[50, 100, 250, 500, 1000, 2000, 5000],
)

CHAT_TURNS_TOTAL = Counter(
    "flatmate_chat_turns_total",
    "Total number of chat turns by classified intent",
    ["intent"],
)

LLM_FALLBACK_TOTAL = Counter(
    "flatmate_llm_fallback_total",
    "Total number of times a fallback replaced an LLM result",
    ["operation"],
)

ERRORS_TOTAL = Counter(
    "flatmate_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for flatmate_errors_total metric."""

    LLM_FAILED = "llm_failed"
    CIRCUIT_OPEN = "circuit_open"
    ACCESS_DENIED = "access_denied"


class ChatIntent:
    SEARCH = "search"
    CONVERSATION = "conversation"


class FallbackOperation:
    EXTRACTION = "extraction"
    COMPLETION = "completion"
    LEASE_ANALYSIS = "lease_analysis"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_active_chat_turns():
    """Call when a chat turn STARTS."""
    ACTIVE_CHAT_TURNS.inc()


def decrement_active_chat_turns():
    """Call when a chat turn ENDS (in finally block)."""
    ACTIVE_CHAT_TURNS.dec()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def observe_llm_tokens(type: str, model: str, token_count: int):
    LLM_TOKENS_TOTAL.labels(type=type, model=model).observe(token_count)


def increment_chat_turn(intent: str):
    CHAT_TURNS_TOTAL.labels(intent=intent).inc()


def increment_llm_fallback(operation: str):
    LLM_FALLBACK_TOTAL.labels(operation=operation).inc()


def increment_error(error_type: str):
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


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
