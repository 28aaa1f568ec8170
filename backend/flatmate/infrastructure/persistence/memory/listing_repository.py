"""
In-memory Listing Repository.
"""

from typing import Optional

from flatmate.domain.entities.listing import Listing
from flatmate.domain.ports.repositories import ListingRepository
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.search_filters import SearchFilters
from flatmate.infrastructure.persistence.memory.database import InMemoryDatabase


class InMemoryListingRepository(ListingRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, listing_id: ListingId) -> Optional[Listing]:
        return self._db.listings.get(listing_id.value)

    async def search(self, filters: SearchFilters) -> list[Listing]:
        return [l for l in self._db.listings.values() if filters.matches(l)]

    async def save(self, listing: Listing) -> None:
        self._db.listings[listing.id.value] = listing
