"""
GetListings Query - listings matching SearchFilters.

AND semantics over the defined filters; empty filters return every listing.
Result order is whatever the store returns.
"""

from dataclasses import dataclass, field

from flatmate.application.common.interfaces import Query, QueryHandler
from flatmate.domain.entities.listing import Listing
from flatmate.domain.ports.repositories import ListingRepository
from flatmate.domain.value_objects.search_filters import SearchFilters


@dataclass(frozen=True)
class GetListingsQuery(Query[list[Listing]]):
    filters: SearchFilters = field(default_factory=SearchFilters)


class GetListingsHandler(QueryHandler[list[Listing]]):
    def __init__(self, listing_repository: ListingRepository):
        self._listing_repository = listing_repository

    async def execute(self, query: GetListingsQuery) -> list[Listing]:
        return await self._listing_repository.search(query.filters)
