"""
Heuristic search parameter extraction, used when the LLM extraction fails.

Deliberately crude:
- location: first token after the word "in"
- max price: first integer next to a currency token (€, EUR, euro, euros)
- bedrooms: first integer followed by bedroom / bed / br
"""

import re
from typing import Optional

from flatmate.domain.value_objects.search_filters import SearchFilters

_LOCATION_RE = re.compile(r"\bin\s+([^\W\d_][\w-]*)", re.IGNORECASE)

_CURRENCY = r"(?:€|eur(?:os?)?\b)"
_PRICE_AFTER_RE = re.compile(r"(\d+)\s*" + _CURRENCY, re.IGNORECASE)
_PRICE_BEFORE_RE = re.compile(r"(?:€|\beur(?:os?)?)\s*(\d+)", re.IGNORECASE)

_BEDROOMS_RE = re.compile(
    r"(\d+)\s*-?\s*(?:bedrooms?|beds?|brs?)\b", re.IGNORECASE
)


def _first_int(*patterns: re.Pattern, text: str) -> Optional[int]:
    """Earliest match across patterns, by position in the text."""
    best: Optional[re.Match] = None
    for pattern in patterns:
        match = pattern.search(text)
        if match and (best is None or match.start() < best.start()):
            best = match
    return int(best.group(1)) if best else None


def basic_parameter_extraction(text: str) -> SearchFilters:
    location_match = _LOCATION_RE.search(text)
    return SearchFilters(
        location=location_match.group(1) if location_match else None,
        max_price=_first_int(_PRICE_AFTER_RE, _PRICE_BEFORE_RE, text=text),
        bedrooms=_first_int(_BEDROOMS_RE, text=text),
    )
