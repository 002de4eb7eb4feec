"""Commander Spellbook combo client, reached through the spellbook proxy."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from combofinder.constants import COMBOS_BY_CARD_QUERY, SPELLBOOK_PROXY_PATH
from combofinder.models import Combo, ComboSearchResult, ComboSource
from combofinder.utils.timeout_config import get_external_client

logger = logging.getLogger(__name__)


def build_combo_query_payload(pattern: str) -> Dict[str, Any]:
    """Wrap a card-name pattern in ILIKE wildcards for a "contains" match."""
    return {
        "query": COMBOS_BY_CARD_QUERY,
        "variables": {"name": f"%{pattern}%"},
    }


def parse_combos(payload: Any) -> List[Combo]:
    """Extract combos from a GraphQL response, skipping malformed entries.

    Raises ValueError when the response itself is not shaped like a combos
    query answer.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"unexpected GraphQL payload type {type(payload).__name__}")

    errors = payload.get("errors")
    if errors:
        logger.warning(f"Spellbook GraphQL returned errors: {errors}")

    data = payload.get("data") or {}
    if not isinstance(data, dict):
        raise ValueError(f"unexpected GraphQL data type {type(data).__name__}")
    raw_combos = data.get("combos") or []
    if not isinstance(raw_combos, list):
        raise ValueError(f"unexpected combos type {type(raw_combos).__name__}")

    combos: List[Combo] = []
    for raw_combo in raw_combos:
        try:
            combos.append(Combo.model_validate(raw_combo))
        except ValidationError as e:
            logger.warning(f"Failed to parse combo {raw_combo!r:.80}: {e}")
            continue
    return combos


class ComboLookupClient:
    """Fail-soft client for combo queries by card-name substring."""

    def __init__(
        self,
        proxy_base_url: Optional[str] = None,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    ) -> None:
        if proxy_base_url is None:
            from config import settings

            proxy_base_url = settings.proxy_base_url
        self.proxy_url = f"{proxy_base_url.rstrip('/')}{SPELLBOOK_PROXY_PATH}"
        self._client_factory = client_factory or get_external_client

    async def query_combos_by_card_substring(self, pattern: str) -> ComboSearchResult:
        """Return up to 50 combos containing a card whose name contains ``pattern``.

        Never raises: transport failures, non-2xx answers and unreadable
        bodies are logged and reported as an empty result tagged "none".
        """
        try:
            async with self._client_factory() as client:
                response = await client.post(self.proxy_url, json=build_combo_query_payload(pattern))
            if not response.is_success:
                logger.error(f"GraphQL proxy error for '{pattern}': proxy answered {response.status_code}")
                return ComboSearchResult.empty()
            combos = parse_combos(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"GraphQL proxy error for '{pattern}': {type(exc).__name__}: {exc}")
            return ComboSearchResult.empty()

        logger.info(f"Spellbook proxy returned {len(combos)} combos for '{pattern}'")
        return ComboSearchResult(combos=tuple(combos), source=ComboSource.GRAPHQL_PROXY)
