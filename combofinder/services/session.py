"""Single owner of the combo finder's user-visible state."""
from __future__ import annotations

import random
from typing import Optional

from combofinder.models import FinderState, SearchOutcome
from combofinder.services.autocomplete import AutocompleteController
from combofinder.services.finder import ComboFinder
from combofinder.services.scryfall import CardLookupClient
from combofinder.services.spellbook import ComboLookupClient


class FinderSession:
    """Input field, suggestion list and submit action for one user."""

    def __init__(
        self,
        card_client: CardLookupClient,
        combo_client: ComboLookupClient,
        rng: Optional[random.Random] = None,
        **autocomplete_options,
    ) -> None:
        self._autocomplete = AutocompleteController(card_client, **autocomplete_options)
        self._finder = ComboFinder(combo_client, card_client, rng=rng)

    @property
    def autocomplete(self) -> AutocompleteController:
        return self._autocomplete

    @property
    def finder(self) -> ComboFinder:
        return self._finder

    def on_input_change(self, text: str) -> None:
        self._autocomplete.on_input_change(text)

    def select_suggestion(self, name: str) -> None:
        """Clicking a suggestion replaces the input text."""
        self._autocomplete.on_input_change(name)

    async def submit(self, text: Optional[str] = None) -> Optional[SearchOutcome]:
        """Submit the current input, or ``text`` typed in one go without autocomplete."""
        if text is not None:
            self._autocomplete.set_input(text)
        return await self._finder.submit(self._autocomplete.input)

    def snapshot(self) -> FinderState:
        return FinderState(
            input=self._autocomplete.input,
            suggestions=self._autocomplete.suggestions,
            loading=self._finder.loading,
            error=self._finder.error,
            result=self._finder.result,
        )
