"""Exception hierarchy for the combo finder services.

All service-level errors derive from ComboFinderError so callers can catch
broadly or specifically depending on context.
"""
from combofinder.constants import CARD_NOT_FOUND_MESSAGE, NO_COMBOS_MESSAGE


class ComboFinderError(Exception):
    """Base class for all combo finder exceptions."""


class NetworkError(ComboFinderError):
    """Raised when a card database call fails outright (transport or non-2xx)."""


class CardNotFound(ComboFinderError):
    """Raised when a named card lookup does not resolve to a card."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(CARD_NOT_FOUND_MESSAGE)


class UserError(ComboFinderError):
    """An error whose message is meant to be shown to the user verbatim."""


class NoCombosFound(UserError):
    """Raised when a combo query for the searched card comes back empty."""

    def __init__(self, card_name: str) -> None:
        self.card_name = card_name
        super().__init__(NO_COMBOS_MESSAGE)
