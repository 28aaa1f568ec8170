"""
SearchFilters Value Object - structured listing constraints derived from a chat turn.

Not persisted. Every field is optional; None means "no constraint".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from flatmate.domain.entities.listing import Listing


def _clean_location(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _clean_number(value: Any) -> Optional[float]:
    """Coerce loosely typed numbers (LLM output, query strings). Invalid -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip().replace(",", "").replace("€", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if number != number or number < 0 or number == math.inf:  # NaN, negative, inf
        return None
    return number


# Prices and bedroom counts are whole numbers: a fractional lower bound rounds
# up and an upper bound rounds down, so no listing outside the bounds matches.
def _lower_bound(value: Any) -> Optional[int]:
    number = _clean_number(value)
    return None if number is None else math.ceil(number)


def _upper_bound(value: Any) -> Optional[int]:
    number = _clean_number(value)
    return None if number is None else math.floor(number)


@dataclass(frozen=True)
class SearchFilters:
    location: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    bedrooms: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchFilters:
        """Build filters from loose data, accepting camelCase or snake_case keys."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return None

        return cls(
            location=_clean_location(pick("location")),
            min_price=_lower_bound(pick("minPrice", "min_price")),
            max_price=_upper_bound(pick("maxPrice", "max_price")),
            bedrooms=_lower_bound(pick("bedrooms")),
        )

    def is_empty(self) -> bool:
        return (
            self.location is None
            and self.min_price is None
            and self.max_price is None
            and self.bedrooms is None
        )

    def matches(self, listing: Listing) -> bool:
        """AND of every defined constraint; bedrooms is a minimum, not exact."""
        if self.location is not None and (
            self.location.lower() not in listing.location.lower()
        ):
            return False
        if self.min_price is not None and listing.price < self.min_price:
            return False
        if self.max_price is not None and listing.price > self.max_price:
            return False
        if self.bedrooms is not None and listing.bedrooms < self.bedrooms:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "bedrooms": self.bedrooms,
        }
