"""Scryfall card database client: autocomplete and named image lookups."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

import httpx
from pydantic import ValidationError

from combofinder.errors import CardNotFound, NetworkError
from combofinder.models import AutocompleteCatalog, ScryfallCard
from combofinder.utils.timeout_config import get_quick_client

logger = logging.getLogger(__name__)


class CardLookupClient:
    """Read-only wrapper around the Scryfall endpoints the finder needs."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    ) -> None:
        if base_url is None:
            from config import settings

            base_url = settings.scryfall_base_url
        self.base_url = base_url.rstrip("/")
        self._client_factory = client_factory or get_quick_client

    async def _get(self, path: str, params: dict) -> httpx.Response:
        async with self._client_factory() as client:
            return await client.get(f"{self.base_url}{path}", params=params)

    async def suggest(self, partial_name: str) -> List[str]:
        """Return Scryfall autocomplete suggestions for a partial card name.

        Raises NetworkError when the call does not succeed; callers treat
        that as non-fatal.
        """
        try:
            response = await self._get("/cards/autocomplete", {"q": partial_name})
            response.raise_for_status()
            catalog = AutocompleteCatalog.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"Scryfall autocomplete failed ({exc.response.status_code})"
            ) from exc
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            raise NetworkError(f"Scryfall autocomplete failed: {exc}") from exc

        return catalog.data

    async def fetch_named_card(self, name: str, fuzzy: bool = False) -> ScryfallCard:
        """Resolve a card by name, exactly or fuzzily.

        Raises CardNotFound when Scryfall answers with a 404 and NetworkError
        for any other failed call.
        """
        mode = "fuzzy" if fuzzy else "exact"
        try:
            response = await self._get("/cards/named", {mode: name})
        except httpx.HTTPError as exc:
            raise NetworkError(f"Scryfall card lookup failed: {exc}") from exc

        if response.status_code == 404:
            raise CardNotFound(name)
        if response.status_code != 200:
            raise NetworkError(f"Scryfall card lookup failed ({response.status_code})")

        try:
            return ScryfallCard.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise NetworkError(f"Scryfall returned an unreadable card for '{name}': {exc}") from exc

    async def lookup_image(self, exact_name: str) -> Optional[str]:
        """Resolve an exact card name to a representative artwork URL.

        Returns None when the card has no usable image. Any failed call,
        including an unknown name, raises NetworkError.
        """
        try:
            card = await self.fetch_named_card(exact_name)
        except CardNotFound as exc:
            raise NetworkError(f"Scryfall card lookup failed for '{exact_name}'") from exc

        image = card.preferred_image()
        if image is None:
            logger.info(f"No artwork available for '{exact_name}'")
        return image

    async def get_card_by_name(self, name: str) -> ScryfallCard:
        """Fuzzy lookup used when the user's spelling may be approximate."""
        return await self.fetch_named_card(name, fuzzy=True)
