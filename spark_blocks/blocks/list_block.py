"""Bloc List — liste ordonnée ou à puces."""
from typing import List, Literal

from pydantic import Field

from .base import BaseBlock


class ListBlock(BaseBlock):
    type: Literal["list"] = "list"
    list_type: Literal["ordered", "unordered"] = "unordered"
    items: List[str] = Field(default_factory=list)
