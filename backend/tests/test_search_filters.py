"""
Unit tests for SearchFilters and the listing query adapter.

Run with: pytest tests/test_search_filters.py -v
"""

import asyncio

import pytest

from flatmate.application.queries.listings import GetListingsHandler, GetListingsQuery
from flatmate.domain.value_objects.search_filters import SearchFilters

from conftest import make_listing


def _titles(listings):
    return sorted(l.title for l in listings)


class TestFromMapping:
    def test_camel_and_snake_case_keys(self):
        camel = SearchFilters.from_mapping(
            {"location": "Berlin", "minPrice": 500, "maxPrice": 1200, "bedrooms": 2}
        )
        snake = SearchFilters.from_mapping(
            {"location": "Berlin", "min_price": 500, "max_price": 1200, "bedrooms": 2}
        )

        assert camel == snake == SearchFilters("Berlin", 500, 1200, 2)

    def test_loose_values_are_coerced(self):
        filters = SearchFilters.from_mapping(
            {"location": "  Munich ", "maxPrice": "1,500", "bedrooms": 2.0}
        )

        assert filters == SearchFilters(location="Munich", max_price=1500, bedrooms=2)

    def test_fractional_bounds_never_widen_the_range(self):
        filters = SearchFilters.from_mapping(
            {"minPrice": 999.5, "maxPrice": "1200.7", "bedrooms": 1.5}
        )

        assert filters == SearchFilters(min_price=1000, max_price=1200, bedrooms=2)
        assert not filters.matches(make_listing(price=999, bedrooms=2))
        assert not filters.matches(make_listing(price=1201, bedrooms=2))
        assert filters.matches(make_listing(price=1000, bedrooms=2))

    @pytest.mark.parametrize(
        "bad",
        [None, "", "cheap", -100, True, float("nan"), float("inf"), [1200], {"eur": 1}],
    )
    def test_invalid_numbers_become_none(self, bad):
        assert SearchFilters.from_mapping({"maxPrice": bad}).max_price is None

    def test_non_string_location_is_dropped(self):
        assert SearchFilters.from_mapping({"location": 42}).location is None
        assert SearchFilters.from_mapping({"location": "   "}).location is None

    def test_to_dict_uses_camel_case(self):
        assert SearchFilters(location="Berlin", max_price=900).to_dict() == {
            "location": "Berlin",
            "minPrice": None,
            "maxPrice": 900,
            "bedrooms": None,
        }


class TestMatches:
    def test_location_is_case_insensitive_substring(self):
        listing = make_listing(location="Berlin Prenzlauer Berg")

        assert SearchFilters(location="berlin").matches(listing)
        assert SearchFilters(location="PRENZLAUER").matches(listing)
        assert not SearchFilters(location="Hamburg").matches(listing)

    def test_price_bounds_are_inclusive(self):
        listing = make_listing(price=1000)

        assert SearchFilters(min_price=1000, max_price=1000).matches(listing)
        assert not SearchFilters(max_price=999).matches(listing)
        assert not SearchFilters(min_price=1001).matches(listing)

    def test_bedrooms_is_a_minimum(self):
        listing = make_listing(bedrooms=3)

        assert SearchFilters(bedrooms=2).matches(listing)
        assert SearchFilters(bedrooms=3).matches(listing)
        assert not SearchFilters(bedrooms=4).matches(listing)


class TestListingQuery:
    def _search(self, repos, filters):
        handler = GetListingsHandler(repos["listings"])
        return asyncio.run(handler.execute(GetListingsQuery(filters=filters)))

    def test_empty_filters_return_everything(self, repos, database):
        assert len(self._search(repos, SearchFilters())) == len(database.listings)

    def test_filters_are_combined_with_and(self, repos):
        result = self._search(repos, SearchFilters(location="Berlin", max_price=1000))

        assert _titles(result) == ["Kreuzberg studio"]

    def test_bedrooms_minimum(self, repos):
        result = self._search(repos, SearchFilters(bedrooms=2))

        assert _titles(result) == ["Mitte two-bed", "Munich family flat"]

    def test_no_matches(self, repos):
        assert self._search(repos, SearchFilters(location="Paris")) == []

    def test_query_is_idempotent(self, repos):
        filters = SearchFilters(location="berlin")

        assert _titles(self._search(repos, filters)) == _titles(
            self._search(repos, filters)
        )
