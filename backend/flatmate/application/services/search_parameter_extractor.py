"""
Search parameter extraction.

Primary path asks the LLM for a strict JSON object; any failure (provider
error, missing credentials, malformed or non-object JSON) falls back to the
regex heuristics in flatmate.domain.services.search_parameters. Never raises.
"""

import logging

from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.result import Err
from flatmate.domain.services.search_parameters import basic_parameter_extraction
from flatmate.domain.value_objects.search_filters import SearchFilters
from flatmate.observability.metrics import FallbackOperation, increment_llm_fallback

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = """Extract property search parameters from this user message. Return ONLY a JSON object with these fields:
- location (string): The city or neighborhood
- minPrice (number, optional): Minimum price in EUR
- maxPrice (number, optional): Maximum price in EUR
- bedrooms (number, optional): Minimum number of bedrooms

User message: "{message}"
"""


class SearchParameterExtractor:
    def __init__(self, llm_client: LLMClient):
        self._llm_client = llm_client

    async def extract(self, text: str) -> SearchFilters:
        result = await self._llm_client.complete_json(
            EXTRACTION_PROMPT.format(message=text)
        )
        if isinstance(result, Err):
            return self._fallback(text, f"LLM unavailable ({result.error})")

        if not isinstance(result.value, dict):
            return self._fallback(
                text, f"expected a JSON object, got {type(result.value).__name__}"
            )

        filters = SearchFilters.from_mapping(result.value)
        logger.debug(f"LLM extracted search filters: {filters}")
        return filters

    def _fallback(self, text: str, reason: str) -> SearchFilters:
        logger.warning(f"Search parameter extraction fell back to heuristics: {reason}")
        increment_llm_fallback(FallbackOperation.EXTRACTION)
        return basic_parameter_extraction(text)
