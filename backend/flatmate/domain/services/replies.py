"""
Assistant reply text for the chat orchestrator.
"""

from flatmate.domain.entities.listing import Listing

SYSTEM_PROMPT = (
    "You are FlatMate AI, a helpful assistant specializing in housing search. "
    "You can help users find rental properties, understand leases, and schedule "
    "viewings. When a user asks for a property search, you should extract their "
    "preferences (location, budget, bedrooms, etc.) and respond with suitable matches."
)

NO_MATCHES_REPLY = (
    "I couldn't find any properties matching your exact criteria. "
    "Would you like to try a broader search or different parameters?"
)

EMPTY_COMPLETION_REPLY = "I'm not sure how to respond to that."

FALLBACK_REPLY = (
    "[Offline mode] I can't reach my language model right now, so this is an "
    "automated reply. I can still search listings for you: tell me the location, "
    "your budget in EUR and how many bedrooms you need."
)


def format_listing(listing: Listing) -> str:
    size = f"{listing.size}m²" if listing.size else "size not specified"
    lines = [
        f"- **{listing.title}** in {listing.location}",
        f"  {listing.bedrooms} bedroom, {listing.bathrooms} bathroom, {size}",
        f"  €{listing.price}/month",
    ]
    if listing.nearest_transport:
        distance = listing.transport_distance or "close"
        lines.append(f"  {distance} to {listing.nearest_transport}")
    return "\n".join(lines)


def format_search_reply(listings: list[Listing]) -> str:
    if not listings:
        return NO_MATCHES_REPLY
    formatted = "\n\n".join(format_listing(listing) for listing in listings)
    return (
        f"I found {len(listings)} properties matching your criteria:\n\n"
        f"{formatted}\n\n"
        "Would you like to schedule a viewing for any of these properties? "
        "Or should I refine the search?"
    )
