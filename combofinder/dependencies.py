"""FastAPI dependency providers for the outbound service clients."""
from combofinder.services.scryfall import CardLookupClient
from combofinder.services.spellbook import ComboLookupClient


def get_card_client() -> CardLookupClient:
    return CardLookupClient()


def get_combo_client() -> ComboLookupClient:
    return ComboLookupClient()
