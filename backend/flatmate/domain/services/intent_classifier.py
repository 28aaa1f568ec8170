"""
Search intent classification.

Best-effort keyword heuristic: a message is a property search if any keyword
occurs anywhere in it, case-insensitively. False positives ("my parents
are visiting" matches "rent") are accepted.
"""

from typing import Iterable, Optional

DEFAULT_SEARCH_KEYWORDS: tuple[str, ...] = (
    "find",
    "search",
    "looking for",
    "apartment",
    "flat",
    "house",
    "property",
    "room",
    "rent",
    "bedroom",
    "location",
    "area",
    "budget",
)


class IntentClassifier:
    def __init__(self, keywords: Optional[Iterable[str]] = None):
        source = DEFAULT_SEARCH_KEYWORDS if keywords is None else keywords
        self._keywords = tuple(k.lower() for k in source if k and k.strip())

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    def is_search_request(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in self._keywords)


def is_search_request(text: str, keywords: Optional[Iterable[str]] = None) -> bool:
    return IntentClassifier(keywords).is_search_request(text)
