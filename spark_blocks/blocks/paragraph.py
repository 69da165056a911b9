"""Bloc Paragraph — texte courant, marques inline conservées dans `html`."""
from typing import Literal, Optional

from .base import BaseBlock


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    text: str = ""
    html: Optional[str] = None
    font_size: int = 14
    font_weight: int = 400
    text_align: str = "left"
    line_height: float = 1.6
    color: str = ""
