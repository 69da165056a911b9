"""Bloc Text Input — champ texte une ligne."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, new_field_name

ValidationType = Literal["none", "email", "phone", "number", "url"]


class TextInputBlock(BaseBlock):
    type: Literal["text-input"] = "text-input"
    label: str = "Field"
    placeholder: str = ""
    required: bool = False
    field_name: str = Field(default_factory=lambda: new_field_name("text"))
    help_text: str = ""
    validation_type: ValidationType = "none"
    max_length: str = ""
