"""Aggregate exports for API models."""
from .cards import AutocompleteCatalog, CardFace, ImageUris, ScryfallCard
from .combos import Combo, ComboCard, ComboSearchResult, ComboSource, SearchOutcome
from .requests import RandomComboRequest
from .responses import AutocompleteResponse, CardImageResponse, FinderState, RandomComboResponse

__all__ = [
    "AutocompleteCatalog",
    "CardFace",
    "ImageUris",
    "ScryfallCard",
    "Combo",
    "ComboCard",
    "ComboSearchResult",
    "ComboSource",
    "SearchOutcome",
    "RandomComboRequest",
    "AutocompleteResponse",
    "CardImageResponse",
    "FinderState",
    "RandomComboResponse",
]
