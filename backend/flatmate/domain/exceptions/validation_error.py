"""
DomainValidationError - Raised when a business rule is violated.
Maps to: HTTP 400 Bad Request on the chat route, 422 elsewhere
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
