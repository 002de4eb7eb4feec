"""Shared constants for the Random Combo Finder."""
from __future__ import annotations

API_VERSION = "1.0.0"
SERVICE_NAME = "MTG Random Combo Finder"

SPELLBOOK_PROXY_PATH = "/api/spellbook"

# Autocomplete behaviour
SUGGEST_LIMIT = 10
MIN_SUGGEST_LENGTH = 2
SUGGEST_DEBOUNCE_SECONDS = 0.150

# Combo lookup behaviour
COMBO_QUERY_LIMIT = 50
COMBOS_BY_CARD_QUERY = f"""
    query($name: String!) {{
      combos(where: {{cards: {{name: {{_ilike: $name}}}}}}, limit: {COMBO_QUERY_LIMIT}) {{
        permalink
        cards {{ name }}
      }}
    }}
"""

NO_COMBOS_MESSAGE = "No combos found for that card."
GENERIC_ERROR_MESSAGE = "Something went wrong."
CARD_NOT_FOUND_MESSAGE = "Card not found."

__all__ = [
    "API_VERSION",
    "SERVICE_NAME",
    "SPELLBOOK_PROXY_PATH",
    "SUGGEST_LIMIT",
    "MIN_SUGGEST_LENGTH",
    "SUGGEST_DEBOUNCE_SECONDS",
    "COMBO_QUERY_LIMIT",
    "COMBOS_BY_CARD_QUERY",
    "NO_COMBOS_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "CARD_NOT_FOUND_MESSAGE",
]
