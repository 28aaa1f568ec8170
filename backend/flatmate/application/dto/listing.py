"""Listing DTO."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from flatmate.domain.entities.listing import Listing


class ListingDTO(BaseModel):
    id: str
    title: str
    description: str
    price: int
    location: str
    bedrooms: int
    bathrooms: int
    contact_info: str
    size: Optional[int] = None
    image_url: Optional[str] = None
    nearest_transport: Optional[str] = None
    transport_distance: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, listing: Listing) -> ListingDTO:
        return cls(
            id=listing.id.value,
            title=listing.title,
            description=listing.description,
            price=listing.price,
            location=listing.location,
            bedrooms=listing.bedrooms,
            bathrooms=listing.bathrooms,
            contact_info=listing.contact_info,
            size=listing.size,
            image_url=listing.image_url,
            nearest_transport=listing.nearest_transport,
            transport_distance=listing.transport_distance,
            created_at=listing.created_at,
        )
