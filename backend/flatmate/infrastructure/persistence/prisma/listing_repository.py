"""
Prisma Listing Repository Implementation.

SearchFilters are translated into a single Prisma `where` clause so the
AND of every defined constraint runs in PostgreSQL.
"""

from typing import Any, Optional

from prisma import Prisma
from prisma.models import Listing as PrismaListing

from flatmate.domain.entities.listing import Listing
from flatmate.domain.ports.repositories import ListingRepository
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.domain.value_objects.search_filters import SearchFilters


def build_where(filters: SearchFilters) -> dict[str, Any]:
    where: dict[str, Any] = {}
    if filters.location is not None:
        where["location"] = {"contains": filters.location, "mode": "insensitive"}
    price: dict[str, int] = {}
    if filters.min_price is not None:
        price["gte"] = filters.min_price
    if filters.max_price is not None:
        price["lte"] = filters.max_price
    if price:
        where["price"] = price
    if filters.bedrooms is not None:
        where["bedrooms"] = {"gte": filters.bedrooms}
    return where


class PrismaListingRepository(ListingRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaListing) -> Listing:
        return Listing(
            id=ListingId(record.id),
            title=record.title,
            description=record.description,
            price=record.price,
            location=record.location,
            bedrooms=record.bedrooms,
            bathrooms=record.bathrooms,
            contact_info=record.contact_info,
            size=record.size,
            image_url=record.image_url,
            nearest_transport=record.nearest_transport,
            transport_distance=record.transport_distance,
            created_at=record.created_at,
        )

    async def get_by_id(self, listing_id: ListingId) -> Optional[Listing]:
        record = await self._prisma.listing.find_unique(where={"id": listing_id.value})
        return self._to_entity(record) if record else None

    async def search(self, filters: SearchFilters) -> list[Listing]:
        records = await self._prisma.listing.find_many(where=build_where(filters))
        return [self._to_entity(record) for record in records]

    async def save(self, listing: Listing) -> None:
        fields = {
            "title": listing.title,
            "description": listing.description,
            "price": listing.price,
            "location": listing.location,
            "bedrooms": listing.bedrooms,
            "bathrooms": listing.bathrooms,
            "contact_info": listing.contact_info,
            "size": listing.size,
            "image_url": listing.image_url,
            "nearest_transport": listing.nearest_transport,
            "transport_distance": listing.transport_distance,
        }
        await self._prisma.listing.upsert(
            where={"id": listing.id.value},
            data={
                "create": {
                    "id": listing.id.value,
                    "created_at": listing.created_at,
                    **fields,
                },
                "update": fields,
            },
        )
