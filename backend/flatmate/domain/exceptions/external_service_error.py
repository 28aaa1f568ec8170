"""
ExternalServiceError - A call to the LLM provider failed.

Recovered locally: returned inside Err(...) by the LLM adapter and replaced
with fallback content by the caller.
"""

from typing import Optional


class ExternalServiceError(Exception):
    """Exception describing a failed external call."""

    def __init__(
        self, service: str, message: str, cause: Optional[BaseException] = None
    ):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.message = message
        self.cause = cause
