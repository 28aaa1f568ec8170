"""
Command/query base classes (CQRS).

Commands change state (chat turn, delete conversation, schedule viewing);
queries only read. Each handler exposes one async `execute`:

    result = await SendMessageHandler(...).execute(SendMessageCommand(...))
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TResult = TypeVar("TResult")


class Command(ABC, Generic[TResult]):
    """Write operation producing TResult."""


class CommandHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, command: Command[TResult]) -> TResult: ...


class Query(ABC, Generic[TResult]):
    """Read operation producing TResult."""


class QueryHandler(ABC, Generic[TResult]):
    @abstractmethod
    async def execute(self, query: Query[TResult]) -> TResult: ...
