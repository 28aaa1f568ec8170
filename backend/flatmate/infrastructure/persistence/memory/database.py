"""
In-memory database shared by the memory repositories.

Demo-mode store used when no PostgreSQL database is configured, and the
backing store for tests. Not durable; one instance per container.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from flatmate.domain.entities.appointment import Appointment
from flatmate.domain.entities.conversation import Conversation
from flatmate.domain.entities.listing import Listing
from flatmate.domain.entities.message import Message
from flatmate.domain.value_objects.listing_id import ListingId

logger = logging.getLogger(__name__)

DEMO_LISTINGS = [
    {
        "title": "Bright 2-bedroom flat near Mauerpark",
        "description": "Renovated Altbau flat with balcony, wooden floors and a fitted kitchen.",
        "price": 1150,
        "location": "Berlin Prenzlauer Berg",
        "bedrooms": 2,
        "bathrooms": 1,
        "size": 68,
        "contact_info": "lettings@flatmate.example",
        "nearest_transport": "U2 Eberswalder Str.",
        "transport_distance": "4 min walk",
    },
    {
        "title": "Studio in Kreuzberg",
        "description": "Compact furnished studio close to the canal, ideal for one person.",
        "price": 850,
        "location": "Berlin Kreuzberg",
        "bedrooms": 1,
        "bathrooms": 1,
        "size": 32,
        "contact_info": "lettings@flatmate.example",
        "nearest_transport": "U1 Kottbusser Tor",
        "transport_distance": "6 min walk",
    },
    {
        "title": "Family home with garden",
        "description": "Three bedrooms, two bathrooms and a private garden in a quiet street.",
        "price": 1900,
        "location": "Berlin Steglitz",
        "bedrooms": 3,
        "bathrooms": 2,
        "size": 110,
        "contact_info": "homes@flatmate.example",
        "nearest_transport": "S1 Rathaus Steglitz",
        "transport_distance": "10 min walk",
    },
    {
        "title": "Shared flat room in Schwabing",
        "description": "Large room in a friendly three-person flatshare, bills included.",
        "price": 720,
        "location": "Munich Schwabing",
        "bedrooms": 1,
        "bathrooms": 1,
        "size": 20,
        "contact_info": "rooms@flatmate.example",
        "nearest_transport": "U3 Münchner Freiheit",
        "transport_distance": "3 min walk",
    },
    {
        "title": "Modern 2-bedroom apartment with lift",
        "description": "New build with underfloor heating, lift and an underground parking spot.",
        "price": 1650,
        "location": "Munich Sendling",
        "bedrooms": 2,
        "bathrooms": 1,
        "size": 74,
        "contact_info": "homes@flatmate.example",
        "nearest_transport": "U6 Harras",
        "transport_distance": "5 min walk",
    },
    {
        "title": "Loft by the harbour",
        "description": "Open-plan loft with high ceilings and views over the Elbe.",
        "price": 1400,
        "location": "Hamburg HafenCity",
        "bedrooms": 2,
        "bathrooms": 2,
        "size": 85,
        "contact_info": "lettings@flatmate.example",
        "nearest_transport": "U4 Überseequartier",
        "transport_distance": "2 min walk",
    },
]


class InMemoryDatabase:
    def __init__(self) -> None:
        self.conversations: Dict[str, Conversation] = {}
        self.messages: Dict[str, List[Message]] = {}
        self.listings: Dict[str, Listing] = {}
        self.appointments: Dict[str, Appointment] = {}

    def seed_demo_listings(self) -> None:
        """Load the demo listings unless listings are already present."""
        if self.listings:
            return
        for data in DEMO_LISTINGS:
            listing = Listing(id=ListingId.generate(), **data)
            self.listings[listing.id.value] = listing
        logger.info(f"Seeded {len(DEMO_LISTINGS)} demo listings")
