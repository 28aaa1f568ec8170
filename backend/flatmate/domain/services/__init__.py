"""
DOMAIN SERVICES - Pure logic, no I/O.
"""

from flatmate.domain.services.intent_classifier import (
    DEFAULT_SEARCH_KEYWORDS,
    IntentClassifier,
    is_search_request,
)
from flatmate.domain.services.search_parameters import basic_parameter_extraction
from flatmate.domain.services import replies

__all__ = [
    "DEFAULT_SEARCH_KEYWORDS",
    "IntentClassifier",
    "is_search_request",
    "basic_parameter_extraction",
    "replies",
]
