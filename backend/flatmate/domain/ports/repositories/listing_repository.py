"""
Listing Repository Port - Interface for listing queries.
"""

from abc import ABC, abstractmethod
from typing import Optional

from flatmate.domain.entities.listing import Listing
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.search_filters import SearchFilters


class ListingRepository(ABC):
    @abstractmethod
    async def get_by_id(self, listing_id: ListingId) -> Optional[Listing]: ...

    @abstractmethod
    async def search(self, filters: SearchFilters) -> list[Listing]:
        """Listings satisfying every defined filter (AND). No ordering guarantee."""
        ...

    @abstractmethod
    async def save(self, listing: Listing) -> None: ...
