"""
Unit tests for SearchParameterExtractor (LLM first, heuristics on failure).

Run with: pytest tests/test_search_parameter_extractor.py -v
"""

import asyncio

from flatmate.application.services import SearchParameterExtractor
from flatmate.domain.result import Ok
from flatmate.domain.value_objects.search_filters import SearchFilters

from conftest import FakeLLMClient

QUERY = "I need a 2BR in Berlin under 1200 EUR"


class TestSearchParameterExtractor:
    def test_uses_llm_json(self):
        llm = FakeLLMClient(
            extraction={"location": "Berlin Mitte", "minPrice": 600, "maxPrice": 1200, "bedrooms": 2}
        )

        filters = asyncio.run(SearchParameterExtractor(llm).extract(QUERY))

        assert filters == SearchFilters("Berlin Mitte", 600, 1200, 2)
        assert QUERY in llm.json_calls[0]

    def test_llm_values_are_validated(self):
        llm = FakeLLMClient(extraction={"location": "", "maxPrice": "about 1000", "bedrooms": "2"})

        filters = asyncio.run(SearchParameterExtractor(llm).extract(QUERY))

        assert filters == SearchFilters(bedrooms=2)

    def test_falls_back_to_heuristics_on_error(self):
        llm = FakeLLMClient(fail=True)

        filters = asyncio.run(SearchParameterExtractor(llm).extract(QUERY))

        assert filters == SearchFilters(location="Berlin", max_price=1200, bedrooms=2)

    def test_falls_back_on_non_object_payload(self):
        class ListPayloadLLM(FakeLLMClient):
            async def complete_json(self, prompt):
                return Ok(["Berlin", 1200])

        filters = asyncio.run(SearchParameterExtractor(ListPayloadLLM()).extract(QUERY))

        assert filters == SearchFilters(location="Berlin", max_price=1200, bedrooms=2)

    def test_empty_llm_object_means_no_constraints(self):
        filters = asyncio.run(
            SearchParameterExtractor(FakeLLMClient(extraction={})).extract(QUERY)
        )

        assert filters.is_empty()
