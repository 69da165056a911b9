"""Bloc Heading — titre h1…h6."""
from typing import Literal, Optional

from pydantic import Field, model_validator

from .base import BaseBlock

HEADING_FONT_SIZES = {1: 32, 2: 24, 3: 20, 4: 18, 5: 16, 6: 14}
HEADING_COLOR = "#0f172a"


class HeadingBlock(BaseBlock):
    type: Literal["heading"] = "heading"
    level: int = Field(default=2, ge=1, le=6)
    text: str = ""
    html: Optional[str] = None
    color: str = HEADING_COLOR
    font_size: Optional[int] = None
    font_weight: Optional[int] = None
    text_align: str = "left"
    line_height: float = 1.3
    margin_bottom: int = 12

    @model_validator(mode="after")
    def _level_defaults(self):
        # taille/graisse dépendent du niveau quand la source ne les donne pas
        if self.font_size is None:
            self.font_size = HEADING_FONT_SIZES[self.level]
        if self.font_weight is None:
            self.font_weight = 700 if self.level == 1 else 600
        return self
