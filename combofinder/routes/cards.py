"""Card autocomplete and artwork routes backed by Scryfall."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from combofinder.constants import MIN_SUGGEST_LENGTH, SUGGEST_LIMIT
from combofinder.dependencies import get_card_client
from combofinder.errors import CardNotFound, NetworkError
from combofinder.models import AutocompleteResponse, CardImageResponse, ScryfallCard
from combofinder.services.scryfall import CardLookupClient

router = APIRouter(prefix="/api/v1/cards", tags=["cards"])
logger = logging.getLogger(__name__)


@router.get("/autocomplete", response_model=AutocompleteResponse)
async def autocomplete_card_names(
    q: str = Query("", description=f"Partial card name (at least {MIN_SUGGEST_LENGTH} characters)"),
    card_client: CardLookupClient = Depends(get_card_client),
) -> AutocompleteResponse:
    """Return up to ten card name suggestions.

    Autocomplete is best-effort: short queries and failed lookups both
    produce an empty list rather than an error.
    """
    query = q.strip()
    if len(query) < MIN_SUGGEST_LENGTH:
        return AutocompleteResponse(data=[])

    try:
        suggestions = await card_client.suggest(query)
    except NetworkError as exc:
        logger.warning(f"Autocomplete unavailable for '{query}': {exc}")
        return AutocompleteResponse(data=[])

    return AutocompleteResponse(data=suggestions[:SUGGEST_LIMIT])


@router.get("/image", response_model=CardImageResponse)
async def get_card_image(
    name: str = Query(..., min_length=1, description="Exact card name"),
    card_client: CardLookupClient = Depends(get_card_client),
) -> CardImageResponse:
    """Return the preferred artwork URL for an exact card name, or null."""
    card_name = name.strip()
    try:
        image_url = await card_client.lookup_image(card_name)
    except NetworkError as exc:
        logger.warning(f"Image lookup failed for '{card_name}': {exc}")
        image_url = None
    return CardImageResponse(name=card_name, image_url=image_url)


@router.get("/named", response_model=ScryfallCard)
async def get_card_by_name(
    fuzzy: str = Query(..., min_length=1, description="Approximate card name"),
    card_client: CardLookupClient = Depends(get_card_client),
) -> ScryfallCard:
    """Fuzzy card lookup."""
    try:
        return await card_client.get_card_by_name(fuzzy)
    except CardNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except NetworkError as exc:
        logger.error(f"Error fetching card '{fuzzy}': {exc}")
        raise HTTPException(status_code=502, detail="Error communicating with card database")
