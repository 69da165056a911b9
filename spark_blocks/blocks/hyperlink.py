"""Bloc Hyperlink — lien autonome."""
from typing import Literal

from .base import BaseBlock


class HyperlinkBlock(BaseBlock):
    type: Literal["hyperlink"] = "hyperlink"
    text: str = "Click here"
    url: str = "#"
    open_in_new_tab: bool = False
    underline: bool = True
    font_size: int = 14
    font_weight: int = 400
    text_align: str = "left"
    line_height: float = 1.6
    color: str = "#0066cc"
