"""Bloc Dropdown — liste déroulante (select)."""
from typing import List, Literal

from pydantic import Field

from .base import BaseBlock, new_field_name


class DropdownBlock(BaseBlock):
    type: Literal["dropdown"] = "dropdown"
    label: str = "Dropdown"
    required: bool = False
    field_name: str = Field(default_factory=lambda: new_field_name("dropdown"))
    help_text: str = ""
    options: List[str] = Field(default_factory=list)
    default_value: str = ""
