"""Tests for debounced autocomplete and stale-response handling."""
import asyncio
from typing import Dict, List

import pytest

from combofinder.constants import SUGGEST_DEBOUNCE_SECONDS, SUGGEST_LIMIT
from combofinder.errors import NetworkError
from combofinder.services.autocomplete import AutocompleteController


class _RecordingCardClient:
    def __init__(self, names=None, error=None):
        self.calls: List[str] = []
        self._names = names if names is not None else []
        self._error = error

    async def suggest(self, partial_name: str) -> List[str]:
        self.calls.append(partial_name)
        if self._error is not None:
            raise self._error
        return list(self._names) or [f"{partial_name} suggestion"]


class _GatedCardClient:
    """Holds every lookup until the test releases it."""

    def __init__(self):
        self.calls: List[str] = []
        self.gates: Dict[str, asyncio.Event] = {}

    async def suggest(self, partial_name: str) -> List[str]:
        self.calls.append(partial_name)
        gate = self.gates.setdefault(partial_name, asyncio.Event())
        await gate.wait()
        return [f"{partial_name} result"]


@pytest.mark.asyncio
async def test_short_input_clears_suggestions_without_lookup():
    card_client = _RecordingCardClient()
    controller = AutocompleteController(card_client, debounce_seconds=0.01)

    controller.on_input_change("Triskelion")
    await controller.wait_until_idle()
    assert controller.suggestions

    for text in ["T", " T ", "", "   "]:
        controller.on_input_change(text)
        await asyncio.sleep(0.03)
        assert controller.suggestions == []

    assert card_client.calls == ["Triskelion"]


@pytest.mark.asyncio
async def test_rapid_keystrokes_issue_single_lookup_for_final_text():
    card_client = _RecordingCardClient()
    controller = AutocompleteController(card_client)

    for text in ["Sw", "Swo", "Swor", "Sworn", "Sworn P"]:
        controller.on_input_change(text)
        await asyncio.sleep(SUGGEST_DEBOUNCE_SECONDS / 10)

    await controller.wait_until_idle()

    assert card_client.calls == ["Sworn P"]
    assert controller.suggestions == ["Sworn P suggestion"]


@pytest.mark.asyncio
async def test_lookup_waits_for_quiet_period():
    card_client = _RecordingCardClient()
    controller = AutocompleteController(card_client, debounce_seconds=0.2)

    controller.on_input_change("Sworn")
    await asyncio.sleep(0.05)
    assert card_client.calls == []

    await controller.wait_until_idle()
    assert card_client.calls == ["Sworn"]


@pytest.mark.asyncio
async def test_stale_response_is_discarded():
    card_client = _GatedCardClient()
    controller = AutocompleteController(card_client, debounce_seconds=0.01)

    controller.on_input_change("Sw")
    await asyncio.sleep(0.05)
    controller.on_input_change("Sworn")
    await asyncio.sleep(0.05)
    assert card_client.calls == ["Sw", "Sworn"]

    card_client.gates["Sworn"].set()
    await asyncio.sleep(0.01)
    assert controller.suggestions == ["Sworn result"]

    card_client.gates["Sw"].set()
    await controller.wait_until_idle()
    assert controller.suggestions == ["Sworn result"]


def test_apply_suggestions_rejects_old_tokens():
    controller = AutocompleteController(_RecordingCardClient())
    controller._generation = 5

    assert controller.apply_suggestions(4, ["Old"]) is False
    assert controller.suggestions == []
    assert controller.apply_suggestions(5, ["New"]) is True
    assert controller.suggestions == ["New"]


@pytest.mark.asyncio
async def test_suggestions_are_capped():
    many = [f"Card {index}" for index in range(40)]
    controller = AutocompleteController(_RecordingCardClient(names=many), debounce_seconds=0.01)

    controller.on_input_change("Card")
    await controller.wait_until_idle()

    assert len(controller.suggestions) == SUGGEST_LIMIT
    assert controller.suggestions == many[:SUGGEST_LIMIT]


@pytest.mark.asyncio
async def test_lookup_failures_are_swallowed():
    card_client = _RecordingCardClient(error=NetworkError("Scryfall autocomplete failed (503)"))
    controller = AutocompleteController(card_client, debounce_seconds=0.01)

    controller.on_input_change("Sworn")
    await controller.wait_until_idle()

    assert card_client.calls == ["Sworn"]
    assert controller.suggestions == []


@pytest.mark.asyncio
async def test_clearing_input_invalidates_in_flight_lookup():
    card_client = _GatedCardClient()
    controller = AutocompleteController(card_client, debounce_seconds=0.01)

    controller.on_input_change("Sworn")
    await asyncio.sleep(0.05)
    controller.on_input_change("S")

    card_client.gates["Sworn"].set()
    await controller.wait_until_idle()

    assert controller.suggestions == []
