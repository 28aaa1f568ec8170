"""
Unit tests for the heuristic (non-LLM) search parameter extraction.

Run with: pytest tests/test_search_parameters.py -v
"""

from flatmate.domain.services.search_parameters import basic_parameter_extraction
from flatmate.domain.value_objects.search_filters import SearchFilters


class TestBasicParameterExtraction:
    def test_full_query(self):
        filters = basic_parameter_extraction("I need a 2BR in Berlin under 1200 EUR")

        assert filters == SearchFilters(location="Berlin", max_price=1200, bedrooms=2)

    def test_location_keeps_original_case(self):
        filters = basic_parameter_extraction("something IN kreuzberg please")

        assert filters.location == "kreuzberg"

    def test_euro_sign_before_and_after_number(self):
        assert basic_parameter_extraction("up to €950").max_price == 950
        assert basic_parameter_extraction("up to 950€").max_price == 950
        assert basic_parameter_extraction("max 950 euros").max_price == 950

    def test_first_price_wins(self):
        filters = basic_parameter_extraction("between 800 EUR and 1000 EUR")

        assert filters.max_price == 800

    def test_bedroom_variants(self):
        assert basic_parameter_extraction("3 bedrooms").bedrooms == 3
        assert basic_parameter_extraction("a 2-bedroom flat").bedrooms == 2
        assert basic_parameter_extraction("1 bed").bedrooms == 1
        assert basic_parameter_extraction("4br house").bedrooms == 4

    def test_plain_numbers_are_not_prices(self):
        filters = basic_parameter_extraction("flat for 2 people, 1200 max")

        assert filters.max_price is None
        assert filters.bedrooms is None

    def test_nothing_recognised(self):
        filters = basic_parameter_extraction("Find me a nice flat")

        assert filters.is_empty()

    def test_min_price_is_never_extracted(self):
        filters = basic_parameter_extraction("at least 700 EUR in Munich")

        assert filters.min_price is None
        assert filters.max_price == 700
