"""
Blocs — exports publics + BlockUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, SparkModel, STYLE_FIELDS, field_attr, new_id, new_field_name
from .heading import HeadingBlock, HEADING_FONT_SIZES, HEADING_COLOR
from .paragraph import ParagraphBlock
from .hyperlink import HyperlinkBlock
from .text_input import TextInputBlock
from .textarea import TextareaBlock
from .dropdown import DropdownBlock
from .checkbox import SingleCheckboxBlock
from .date_picker import DatePickerBlock
from .divider import DividerBlock
from .image import ImageBlock
from .table import TableBlock
from .list_block import ListBlock
from .button import ButtonBlock
from .raw_html import RawHTMLBlock

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        HyperlinkBlock,
        TextInputBlock,
        TextareaBlock,
        DropdownBlock,
        SingleCheckboxBlock,
        DatePickerBlock,
        DividerBlock,
        ImageBlock,
        TableBlock,
        ListBlock,
        ButtonBlock,
        RawHTMLBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_REGISTRY: dict = {
    "heading":         HeadingBlock,
    "paragraph":       ParagraphBlock,
    "hyperlink":       HyperlinkBlock,
    "text-input":      TextInputBlock,
    "textarea":        TextareaBlock,
    "dropdown":        DropdownBlock,
    "single-checkbox": SingleCheckboxBlock,
    "date-picker":     DatePickerBlock,
    "divider":         DividerBlock,
    "image":           ImageBlock,
    "table":           TableBlock,
    "list":            ListBlock,
    "button":          ButtonBlock,
    "raw-html":        RawHTMLBlock,
}

__all__ = [
    # Base
    "BaseBlock", "SparkModel", "STYLE_FIELDS", "field_attr", "new_id", "new_field_name",
    # Contenu
    "HeadingBlock", "HEADING_FONT_SIZES", "HEADING_COLOR",
    "ParagraphBlock", "HyperlinkBlock",
    "DividerBlock", "ImageBlock", "TableBlock", "ListBlock", "RawHTMLBlock",
    # Formulaire
    "TextInputBlock", "TextareaBlock", "DropdownBlock",
    "SingleCheckboxBlock", "DatePickerBlock", "ButtonBlock",
    # Union
    "BlockUnion", "BLOCK_REGISTRY",
]
