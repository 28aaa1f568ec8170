"""
EntityId - base for the UUID-string identifiers of stored entities.

Ids cross the HTTP boundary as plain strings; constructing one validates it
(ValueError on empty or non-UUID input), so handlers can map bad ids to 404/403.
"""

from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID, uuid4

TId = TypeVar("TId", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError(f"{type(self).__name__} cannot be empty")
        try:
            UUID(self.value)
        except (ValueError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid {type(self).__name__} (UUID): {self.value}") from e

    @classmethod
    def generate(cls: type[TId]) -> TId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
