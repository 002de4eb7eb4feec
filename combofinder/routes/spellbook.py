"""Forwarding proxy for Commander Spellbook GraphQL queries."""
from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse

from combofinder.constants import SPELLBOOK_PROXY_PATH
from combofinder.utils.timeout_config import get_external_client

router = APIRouter(tags=["spellbook"])
logger = logging.getLogger(__name__)


@router.post(SPELLBOOK_PROXY_PATH)
async def forward_spellbook_query(payload: Dict[str, Any] = Body(...)) -> JSONResponse:
    """Forward a GraphQL request body upstream untouched and relay the JSON answer.

    Only the presence of a query string is checked; operationName, extensions
    and null variables pass through as sent. The upstream status code is
    preserved so that clients can tell a failed query from an empty one.
    """
    from config import settings

    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        raise HTTPException(status_code=422, detail="GraphQL body requires a non-empty 'query' string")

    upstream_url = settings.spellbook_graphql_url
    try:
        async with get_external_client() as client:
            response = await client.post(
                upstream_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
    except httpx.TimeoutException:
        logger.error(f"Spellbook upstream timeout: {upstream_url}")
        raise HTTPException(status_code=504, detail="Combo database timed out")
    except httpx.HTTPError as exc:
        logger.error(f"Spellbook upstream unreachable: {type(exc).__name__}: {exc}")
        raise HTTPException(status_code=502, detail="Error communicating with combo database")

    try:
        body = response.json()
    except ValueError:
        logger.error(f"Spellbook upstream returned non-JSON body ({response.status_code})")
        raise HTTPException(status_code=502, detail="Combo database returned an invalid response")

    if response.status_code >= 400:
        logger.warning(f"Spellbook upstream answered {response.status_code}")
    return JSONResponse(status_code=response.status_code, content=body)
