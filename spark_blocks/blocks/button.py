"""Bloc Button."""
from typing import Literal

from .base import BaseBlock


class ButtonBlock(BaseBlock):
    type: Literal["button"] = "button"
    label: str = "Button"
    button_type: Literal["button", "submit", "reset"] = "button"
    variant: Literal["primary", "secondary", "outline"] = "primary"
