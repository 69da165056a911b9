"""Bloc Date Picker."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock, new_field_name


class DatePickerBlock(BaseBlock):
    type: Literal["date-picker"] = "date-picker"
    label: str = "Date"
    required: bool = False
    field_name: str = Field(default_factory=lambda: new_field_name("date"))
    help_text: str = ""
