"""Debounced card-name autocomplete with stale-response protection."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Set

from combofinder.constants import MIN_SUGGEST_LENGTH, SUGGEST_DEBOUNCE_SECONDS, SUGGEST_LIMIT
from combofinder.services.scryfall import CardLookupClient

logger = logging.getLogger(__name__)


class AutocompleteController:
    """Turns input changes into at most one suggestion lookup per quiet period.

    Every fired lookup carries a generation token; only the response for the
    most recently issued token is applied, so a slow response for older input
    can never overwrite suggestions for newer input. Only the debounce wait is
    cancellable; a lookup that already went out runs to completion and is
    ignored if stale.

    Must be driven from a running asyncio event loop.
    """

    def __init__(
        self,
        card_client: CardLookupClient,
        debounce_seconds: float = SUGGEST_DEBOUNCE_SECONDS,
        limit: int = SUGGEST_LIMIT,
        min_length: int = MIN_SUGGEST_LENGTH,
    ) -> None:
        self._card_client = card_client
        self._debounce_seconds = debounce_seconds
        self._limit = limit
        self._min_length = min_length

        self._input = ""
        self._suggestions: List[str] = []
        self._generation = 0
        self._pending: Optional[asyncio.Task] = None
        self._tasks: Set[asyncio.Task] = set()

    @property
    def input(self) -> str:
        return self._input

    @property
    def suggestions(self) -> List[str]:
        return list(self._suggestions)

    @property
    def generation(self) -> int:
        return self._generation

    def set_input(self, text: str) -> None:
        """Record the input text without scheduling a suggestion lookup."""
        self._input = text

    def on_input_change(self, text: str) -> None:
        self._input = text
        self._cancel_pending()

        if len(text.strip()) < self._min_length:
            # Idle: nothing scheduled, and any lookup still in flight is now stale.
            self._generation += 1
            self._suggestions = []
            return

        task = asyncio.get_running_loop().create_task(self._debounced_lookup(text))
        self._pending = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    async def _debounced_lookup(self, text: str) -> None:
        await asyncio.sleep(self._debounce_seconds)

        # Past the quiet period: from here on the lookup is no longer cancellable.
        self._pending = None
        self._generation += 1
        token = self._generation

        try:
            names = await self._card_client.suggest(text)
        except Exception as exc:
            logger.debug(f"Ignoring autocomplete failure for '{text}': {exc}")
            return

        if not self.apply_suggestions(token, names):
            logger.debug(f"Discarded stale suggestions for '{text}' (token {token})")

    def apply_suggestions(self, token: int, names: Sequence[str]) -> bool:
        """Apply a lookup response if ``token`` is still the latest issued."""
        if token != self._generation:
            return False
        self._suggestions = list(names[: self._limit])
        return True

    async def wait_until_idle(self) -> None:
        """Wait for the pending debounce and every in-flight lookup to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
