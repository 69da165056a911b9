"""Bloc Single Checkbox — case d'acceptation unique."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, new_field_name


class SingleCheckboxBlock(BaseBlock):
    type: Literal["single-checkbox"] = "single-checkbox"
    label: str = "Checkbox"
    required: bool = False
    field_name: str = Field(default_factory=lambda: new_field_name("agreement"))
    checked: bool = False
