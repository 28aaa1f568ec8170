"""Listing queries."""

from flatmate.application.queries.listings.get_listings import (
    GetListingsQuery,
    GetListingsHandler,
)
from flatmate.application.queries.listings.get_listing import (
    GetListingQuery,
    GetListingHandler,
)

__all__ = [
    "GetListingsQuery",
    "GetListingsHandler",
    "GetListingQuery",
    "GetListingHandler",
]
