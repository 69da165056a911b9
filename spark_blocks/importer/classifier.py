"""
Layout Classifier — choisit UNE stratégie d'import, par priorité :
  1. section      : au moins un conteneur marqué section/colonne
  2. table-email  : table au premier niveau + une table "de layout"
  3. generic      : chaque enfant de premier niveau traité seul
"""
import logging
from typing import List

from bs4 import Tag

from ..core.config import (
    COLUMN_CLASS,
    EDITOR_COLUMN_ATTR,
    EDITOR_SECTION_ATTR,
    LAYOUT_TABLE_MIN_WIDTH,
    LEGACY_COLUMN_ATTR,
    LEGACY_SECTION_ATTR,
    SECTION_CLASS,
)
from .styles import element_style, parse_float

log = logging.getLogger(__name__)


def element_children(el: Tag) -> List[Tag]:
    return [c for c in el.children if isinstance(c, Tag)]


def _has_class(el: Tag, name: str) -> bool:
    return name in (el.get("class") or [])


def is_section_marker(el: Tag) -> bool:
    return (
        el.has_attr(EDITOR_SECTION_ATTR)
        or el.has_attr(LEGACY_SECTION_ATTR)
        or _has_class(el, SECTION_CLASS)
    )


def is_column_marker(el: Tag) -> bool:
    return (
        el.has_attr(EDITOR_COLUMN_ATTR)
        or el.has_attr(LEGACY_COLUMN_ATTR)
        or _has_class(el, COLUMN_CLASS)
    )


def _declared_width(table: Tag) -> float:
    """Largeur déclarée (attribut ou style), comparée sans unité."""
    widths = [parse_float(raw) for raw in (table.get("width"), element_style(table).get("width"))]
    return max((w for w in widths if w is not None), default=0.0)


def is_layout_table(table: Tag) -> bool:
    """Table utilisée comme grille de mise en page (emails, exports legacy)."""
    if (table.get("role") or "").strip().lower() == "presentation":
        return True
    if table.has_attr("cellpadding"):
        return True
    return _declared_width(table) > LAYOUT_TABLE_MIN_WIDTH


def classify_layout(root: Tag) -> str:
    """Renvoie 'section', 'table-email' ou 'generic' (total, déterministe)."""
    if root.find(lambda t: is_section_marker(t) or is_column_marker(t)) is not None:
        kind = "section"
    elif (any(c.name == "table" for c in element_children(root))
            and any(is_layout_table(t) for t in root.find_all("table"))):
        kind = "table-email"
    else:
        kind = "generic"
    log.debug("Layout détecté : %s", kind)
    return kind
