"""Bloc Image — image seule."""
from typing import Literal

from .base import BaseBlock


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    src: str = ""
    alt: str = ""
    alignment: Literal["left", "center", "right"] = "center"
    max_height: int = 300
