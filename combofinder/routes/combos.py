"""Combo search and random combo routes."""
from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from combofinder.dependencies import get_card_client, get_combo_client
from combofinder.models import ComboSearchResult, RandomComboRequest, RandomComboResponse
from combofinder.services.scryfall import CardLookupClient
from combofinder.services.session import FinderSession
from combofinder.services.spellbook import ComboLookupClient

router = APIRouter(prefix="/api/v1/combos", tags=["combos"])
logger = logging.getLogger(__name__)


@router.get("/search", response_model=ComboSearchResult)
async def search_combos(
    card: str = Query(..., min_length=1, description="Card name or fragment"),
    combo_client: ComboLookupClient = Depends(get_combo_client),
) -> ComboSearchResult:
    """Return every combo (up to 50) with a member whose name contains ``card``."""
    pattern = card.strip()
    if not pattern:
        raise HTTPException(status_code=400, detail="Card name is required")
    return await combo_client.query_combos_by_card_substring(pattern)


@router.post("/random", response_model=RandomComboResponse)
async def find_random_combo(
    request: RandomComboRequest,
    card_client: CardLookupClient = Depends(get_card_client),
    combo_client: ComboLookupClient = Depends(get_combo_client),
) -> RandomComboResponse:
    """Pick a random combo for the card, plus a random partner card and artwork.

    Mirrors one submit of the finder form: blank names change nothing, and
    user-facing failures come back in ``state.error`` rather than as HTTP
    errors.
    """
    session = FinderSession(card_client, combo_client)
    outcome = await session.submit(request.card_name)

    state = session.snapshot()
    if state.error:
        logger.info(f"Random combo for '{request.card_name}' failed: {state.error}")

    return RandomComboResponse(
        success=outcome is not None,
        state=state,
        timestamp=datetime.utcnow().isoformat(),
    )
