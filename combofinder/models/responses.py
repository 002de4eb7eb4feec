"""Response models for the combo finder endpoints."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .combos import SearchOutcome


class AutocompleteResponse(BaseModel):
    object: str = "list"
    data: List[str] = Field(default_factory=list)


class CardImageResponse(BaseModel):
    name: str
    image_url: Optional[str] = None


class FinderState(BaseModel):
    """Snapshot of everything a combo finder session shows the user."""

    input: str = ""
    suggestions: List[str] = Field(default_factory=list)
    loading: bool = False
    error: str = ""
    result: Optional[SearchOutcome] = None


class RandomComboResponse(BaseModel):
    success: bool
    state: FinderState
    timestamp: str
