"""
Listing Entity - A rental property. Read-mostly reference data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from flatmate.domain.value_objects.listing_id import ListingId


@dataclass
class Listing:
    # Required fields (no defaults) - must come first
    id: ListingId
    title: str
    description: str
    price: int  # EUR per month
    location: str
    bedrooms: int
    bathrooms: int
    contact_info: str
    # Optional fields (with defaults) - must come last
    size: Optional[int] = None  # square meters
    image_url: Optional[str] = None
    nearest_transport: Optional[str] = None
    transport_distance: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("Listing price cannot be negative")
        if self.bedrooms < 0 or self.bathrooms < 0:
            raise ValueError("Room counts cannot be negative")
