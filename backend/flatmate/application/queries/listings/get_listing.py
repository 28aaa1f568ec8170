"""GetListing Query - single listing by id."""

from dataclasses import dataclass

from flatmate.application.common.interfaces import Query, QueryHandler
from flatmate.domain.entities.listing import Listing
from flatmate.domain.exceptions import EntityNotFoundError
from flatmate.domain.ports.repositories import ListingRepository
from flatmate.domain.value_objects.listing_id import ListingId


@dataclass(frozen=True)
class GetListingQuery(Query[Listing]):
    listing_id: str


class GetListingHandler(QueryHandler[Listing]):
    def __init__(self, listing_repository: ListingRepository):
        self._listing_repository = listing_repository

    async def execute(self, query: GetListingQuery) -> Listing:
        try:
            listing_id = ListingId(query.listing_id)
        except ValueError as e:
            raise EntityNotFoundError("Listing not found") from e

        listing = await self._listing_repository.get_by_id(listing_id)
        if listing is None:
            raise EntityNotFoundError("Listing not found")
        return listing
