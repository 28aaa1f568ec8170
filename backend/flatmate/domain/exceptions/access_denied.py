"""
AccessDeniedError - the caller may not use this resource.
Maps to: HTTP 403 Forbidden

Raised for conversations that are unknown or owned by someone else (one
message for both, so ownership never leaks) and for subscription tier limits.
"""


class AccessDeniedError(Exception):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message
