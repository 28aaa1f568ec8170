"""
EntityNotFoundError - a conversation, listing or appointment id matched nothing.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message
