"""Commander Spellbook combo models."""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ComboSource(str, Enum):
    """Provenance of a combo search result."""

    GRAPHQL_PROXY = "graphql-proxy"
    NONE = "none"


class ComboCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Combo(BaseModel):
    """One documented multi-card interaction."""

    model_config = ConfigDict(frozen=True)

    permalink: str
    cards: Tuple[ComboCard, ...] = ()

    @property
    def member_names(self) -> List[str]:
        return [card.name for card in self.cards]


class ComboSearchResult(BaseModel):
    """Combos returned for a card-name pattern, tagged with where they came from."""

    model_config = ConfigDict(frozen=True)

    combos: Tuple[Combo, ...] = ()
    source: ComboSource = ComboSource.NONE

    @classmethod
    def empty(cls) -> "ComboSearchResult":
        return cls(combos=(), source=ComboSource.NONE)


class SearchOutcome(BaseModel):
    """Result of one successful combo submission."""

    model_config = ConfigDict(frozen=True)

    searched_card: str
    chosen_combo: Combo
    partner_card: Optional[str] = None
    searched_image: Optional[str] = None
    partner_image: Optional[str] = None
