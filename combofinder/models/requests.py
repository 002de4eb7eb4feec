"""Request payload models."""
from pydantic import BaseModel, Field


class RandomComboRequest(BaseModel):
    card_name: str = Field("", description="Card name typed by the user")
