"""Card-related Pydantic models."""
from typing import List, Optional

from pydantic import BaseModel, Field


class ImageUris(BaseModel):
    normal: Optional[str] = None
    large: Optional[str] = None
    small: Optional[str] = None
    art_crop: Optional[str] = None


class CardFace(BaseModel):
    name: Optional[str] = None
    image_uris: Optional[ImageUris] = None


class ScryfallCard(BaseModel):
    """Subset of a Scryfall card object needed to render artwork."""

    id: Optional[str] = None
    name: str
    type_line: Optional[str] = None
    oracle_text: Optional[str] = None
    scryfall_uri: Optional[str] = None
    image_uris: Optional[ImageUris] = None
    card_faces: List[CardFace] = Field(default_factory=list)

    def _front_face_images(self) -> Optional[ImageUris]:
        if self.card_faces:
            return self.card_faces[0].image_uris
        return None

    def preferred_image(self) -> Optional[str]:
        """Return the best artwork URL: normal before large, card before its front face."""
        card_images = self.image_uris
        face_images = self._front_face_images()
        for size in ("normal", "large"):
            for images in (card_images, face_images):
                url = getattr(images, size, None) if images else None
                if url:
                    return url
        return None


class AutocompleteCatalog(BaseModel):
    object: str = "catalog"
    total_values: Optional[int] = None
    data: List[str] = Field(default_factory=list)
