"""Submit-time workflow: random combo, random partner, concurrent artwork."""
from __future__ import annotations

import asyncio
import logging
import random
from typing import List, Optional

from combofinder.constants import GENERIC_ERROR_MESSAGE
from combofinder.errors import NoCombosFound, UserError
from combofinder.models import Combo, SearchOutcome
from combofinder.services.scryfall import CardLookupClient
from combofinder.services.spellbook import ComboLookupClient

logger = logging.getLogger(__name__)


def partner_candidates(combo: Combo, searched_card: str) -> List[str]:
    """Names of the combo's other members, compared case-insensitively."""
    searched = searched_card.lower()
    return [name for name in combo.member_names if name.lower() != searched]


class ComboFinder:
    """Owns the loading/error/result state of combo submissions."""

    def __init__(
        self,
        combo_client: ComboLookupClient,
        card_client: CardLookupClient,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._combo_client = combo_client
        self._card_client = card_client
        self._rng = rng or random.Random()

        self._loading = False
        self._error = ""
        self._result: Optional[SearchOutcome] = None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str:
        return self._error

    @property
    def result(self) -> Optional[SearchOutcome]:
        return self._result

    async def submit(self, raw_input: str) -> Optional[SearchOutcome]:
        """Resolve a random combo for the typed card name.

        Blank input is a silent no-op, as is a submission while another one
        is still loading. Every failure ends up in ``error``; nothing raises.
        """
        card_name = (raw_input or "").strip()
        if not card_name:
            return None
        if self._loading:
            logger.info(f"Ignoring submission for '{card_name}' while another is in flight")
            return None

        self._error = ""
        self._loading = True
        self._result = None

        try:
            self._result = await self._resolve(card_name)
        except UserError as exc:
            self._error = str(exc)
        except Exception as exc:
            logger.exception(f"Combo resolution failed for '{card_name}'")
            self._error = str(exc) or GENERIC_ERROR_MESSAGE
        finally:
            self._loading = False

        return self._result

    async def _resolve(self, card_name: str) -> SearchOutcome:
        search = await self._combo_client.query_combos_by_card_substring(card_name)
        if not search.combos:
            raise NoCombosFound(card_name)

        combo = self._rng.choice(search.combos)

        partner_card = None
        candidates = partner_candidates(combo, card_name)
        if candidates:
            partner_card = self._rng.choice(candidates)

        searched_image, partner_image = await asyncio.gather(
            self._image_or_none(card_name),
            self._image_or_none(partner_card),
        )

        logger.info(f"Picked combo {combo.permalink} for '{card_name}' with partner {partner_card!r}")
        return SearchOutcome(
            searched_card=card_name,
            chosen_combo=combo,
            partner_card=partner_card,
            searched_image=searched_image,
            partner_image=partner_image,
        )

    async def _image_or_none(self, card_name: Optional[str]) -> Optional[str]:
        if not card_name:
            return None
        try:
            return await self._card_client.lookup_image(card_name)
        except Exception as exc:
            logger.warning(f"Image lookup failed for '{card_name}': {exc}")
            return None
