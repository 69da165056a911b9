"""
Style Extractor — extrait un ensemble borné de propriétés inline
(fond, bordure, marges, padding, largeur %) vers les champs de BaseBlock.

Toute autre propriété est ignorée ici ; elle reste dans le markup
si l'élément finit en bloc raw-html.
"""
import re
from typing import Dict, List, Optional

from bs4 import Tag

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
_COLOR_RE  = re.compile(r"^(#[0-9a-fA-F]{3,8}|(?:rgb|rgba|hsl|hsla)\([^)]*\)|[a-zA-Z]+)$")
_BORDER_STYLES = {
    "none", "hidden", "solid", "dashed", "dotted", "double",
    "groove", "ridge", "inset", "outset",
}
_NON_COLORS = {"none", "transparent", "inherit", "initial", "unset", "auto"}


def parse_inline_style(value: Optional[str]) -> Dict[str, str]:
    """'a: b; c: d' → {'a': 'b', 'c': 'd'} (noms en minuscules, dernier gagne)."""
    style: Dict[str, str] = {}
    if not value:
        return style
    for decl in value.split(";"):
        if ":" not in decl:
            continue
        k, v = decl.split(":", 1)
        k, v = k.strip().lower(), v.strip()
        if k and v:
            style[k] = v.replace("!important", "").strip()
    return style


def element_style(el: Tag) -> Dict[str, str]:
    return parse_inline_style(el.get("style"))


def parse_length(value: Optional[str]) -> Optional[int]:
    """Premier nombre d'une valeur CSS, arrondi ('12px' → 12, '1.5em' → 2)."""
    if value is None:
        return None
    m = _NUMBER_RE.search(str(value))
    if not m:
        return None
    return int(round(float(m.group(0))))


def parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    m = _NUMBER_RE.search(str(value))
    return float(m.group(0)) if m else None


def parse_font_weight(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    v = value.strip().lower()
    if v in ("bold", "bolder"):
        return 700
    if v in ("normal", "lighter"):
        return 400
    return parse_length(v)


def parse_percent_width(value: Optional[str]) -> Optional[int]:
    """Largeur acceptée seulement en pourcentage, dans [1, 100]."""
    if not value:
        return None
    v = str(value).strip()
    if not v.endswith("%"):
        return None
    pct = parse_float(v)
    if pct is None or not 1 <= pct <= 100:
        return None
    return int(round(pct))


def is_color(token: str) -> bool:
    t = token.strip().lower()
    if not t or t in _NON_COLORS or t in _BORDER_STYLES:
        return False
    return bool(_COLOR_RE.match(t))


def _expand_box(value: str) -> Optional[List[Optional[int]]]:
    """Raccourci CSS 1–4 valeurs → [top, right, bottom, left] ('auto' → None)."""
    parts = value.split()
    if not 1 <= len(parts) <= 4:
        return None
    vals = [None if p.lower() == "auto" else parse_length(p) for p in parts]
    if len(vals) == 1:
        vals = vals * 4
    elif len(vals) == 2:
        vals = [vals[0], vals[1], vals[0], vals[1]]
    elif len(vals) == 3:
        vals = [vals[0], vals[1], vals[2], vals[1]]
    return vals


def _margins(style: Dict[str, str]) -> Dict[str, int]:
    out: Dict[str, int] = {}
    sides = ("top", "right", "bottom", "left")
    if "margin" in style:
        box = _expand_box(style["margin"])
        if box:
            for side, v in zip(sides, box):
                if v is not None:
                    out[f"margin_{side}"] = v
    for side in sides:
        v = parse_length(style.get(f"margin-{side}"))
        if v is not None:
            out[f"margin_{side}"] = v
    return out


def _paddings(style: Dict[str, str]) -> Dict[str, int]:
    top = right = bottom = left = None
    if "padding" in style:
        box = _expand_box(style["padding"])
        if box:
            top, right, bottom, left = box
    left   = parse_length(style.get("padding-left"))   if "padding-left"   in style else left
    right  = parse_length(style.get("padding-right"))  if "padding-right"  in style else right
    top    = parse_length(style.get("padding-top"))    if "padding-top"    in style else top
    bottom = parse_length(style.get("padding-bottom")) if "padding-bottom" in style else bottom

    out: Dict[str, int] = {}
    x = left if left is not None else right
    y = top if top is not None else bottom
    if x is not None:
        out["padding_x"] = x
    if y is not None:
        out["padding_y"] = y
    return out


def _background(el: Tag, style: Dict[str, str]) -> Optional[str]:
    if "background-color" in style and is_color(style["background-color"]):
        return style["background-color"]
    if "background" in style:
        # seulement une couleur simple (pas d'url(), pas de dégradé)
        token = style["background"].split()[0] if style["background"].split() else ""
        if len(style["background"].split()) == 1 and is_color(token):
            return token
    bgcolor = el.get("bgcolor")
    if bgcolor and is_color(bgcolor):
        return bgcolor
    return None


def _border(el: Tag, style: Dict[str, str]) -> Dict[str, object]:
    out: Dict[str, object] = {}
    if "border" in style:
        for token in style["border"].split():
            if token.lower() in _BORDER_STYLES:
                continue
            if is_color(token):
                out["border_color"] = token
            else:
                w = parse_length(token)
                if w is not None:
                    out["border_width"] = w
    elif el.get("border") is not None and el.name in ("table", "img"):
        w = parse_length(el.get("border"))
        if w is not None:
            out["border_width"] = w
    w = parse_length(style.get("border-width"))
    if w is not None:
        out["border_width"] = w
    if is_color(style.get("border-color", "")):
        out["border_color"] = style["border-color"]
    r = parse_length(style.get("border-radius"))
    if r is not None:
        out["border_radius"] = r
    return out


def extract_base_styles(el: Tag) -> Dict[str, object]:
    """
    Champs BaseBlock présents sur l'élément (seules les clés trouvées
    sont renvoyées — les défauts de la variante s'appliquent au reste).
    """
    style = element_style(el)
    out: Dict[str, object] = {}

    width = parse_percent_width(style.get("width")) or parse_percent_width(el.get("width"))
    if width is not None:
        out["width"] = width

    out.update(_margins(style))
    out.update(_paddings(style))

    bg = _background(el, style)
    if bg:
        out["background_color"] = bg

    out.update(_border(el, style))
    return out
