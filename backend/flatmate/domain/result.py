"""
Result type for calls that may degrade instead of failing.

    result = await llm_client.complete(messages)
    if isinstance(result, Err):
        ...  # substitute fallback content
    else:
        text = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]
