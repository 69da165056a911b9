"""Bloc Table — tableau de données (pas de layout)."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock


class TableBlock(BaseBlock):
    type: Literal["table"] = "table"
    headers: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)
    header_row: bool = True
    bordered: bool = True
    striped: bool = False
    column_widths: Optional[List[float]] = None
    margin_top: int = 8
