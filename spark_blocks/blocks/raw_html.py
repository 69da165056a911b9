"""
Bloc Raw HTML — fallback universel.
Le markup est opaque : jamais décomposé, jamais passé au Style Extractor,
réémis tel quel à l'export.
"""
from typing import Literal

from .base import BaseBlock


class RawHTMLBlock(BaseBlock):
    type: Literal["raw-html"] = "raw-html"
    html: str = ""
