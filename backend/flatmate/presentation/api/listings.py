"""
Listings API Router - browse listings directly, outside of chat.

Query parameters use the same names the chat extractor produces
(location, minPrice, maxPrice, bedrooms) and go through the same
SearchFilters validation.
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from flatmate.application.dto import ListingDTO
from flatmate.application.queries.listings import (
    GetListingHandler,
    GetListingQuery,
    GetListingsHandler,
    GetListingsQuery,
)
from flatmate.domain.exceptions import EntityNotFoundError
from flatmate.domain.value_objects.search_filters import SearchFilters
from flatmate.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/listings", tags=["listings"])


@router.get("", response_model=list[ListingDTO], status_code=status.HTTP_200_OK)
@inject
async def get_listings(
    handler: FromDishka[GetListingsHandler],
    current_user: AuthUser = Depends(get_current_user),
    location: Optional[str] = None,
    min_price: Optional[str] = Query(default=None, alias="minPrice"),
    max_price: Optional[str] = Query(default=None, alias="maxPrice"),
    bedrooms: Optional[str] = None,
):
    filters = SearchFilters.from_mapping(
        {
            "location": location,
            "minPrice": min_price,
            "maxPrice": max_price,
            "bedrooms": bedrooms,
        }
    )
    listings = await handler.execute(GetListingsQuery(filters=filters))
    return [ListingDTO.from_entity(l) for l in listings]


@router.get("/{listing_id}", response_model=ListingDTO, status_code=status.HTTP_200_OK)
@inject
async def get_listing(
    listing_id: str,
    handler: FromDishka[GetListingHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        listing = await handler.execute(GetListingQuery(listing_id=listing_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ListingDTO.from_entity(listing)
