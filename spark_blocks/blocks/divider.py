"""Bloc Divider — séparateur horizontal."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    thickness: int = Field(default=1, ge=0)
    style: Literal["solid", "dashed", "dotted"] = "solid"
    color: str = "#e2e8f0"
    margin_top: int = 16
    margin_bottom: int = 16
