"""Bloc Textarea — champ texte multi-lignes."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, new_field_name


class TextareaBlock(BaseBlock):
    type: Literal["textarea"] = "textarea"
    label: str = "Text Area"
    placeholder: str = ""
    required: bool = False
    field_name: str = Field(default_factory=lambda: new_field_name("textarea"))
    help_text: str = ""
    rows: int = Field(default=4, ge=1)
    max_length: str = ""
    default_value: str = ""
