"""
Element-to-Block Mapper — fonction totale `element → Block | None`.

Dispatch par nom de tag (_TAG_HANDLERS) ; l'entrée par défaut enveloppe
l'élément en bloc raw-html avec un warning, ce qui rend la table totale.
None = "ne contribue rien" (script/style/meta, input radio, conteneur vide).

Les warnings sont accumulés dans le MapContext passé à chaque appel
récursif — aucun état global.
"""
import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from bs4 import Tag
from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction
from pydantic import ValidationError

from ..blocks import (
    BaseBlock,
    ButtonBlock,
    DatePickerBlock,
    DividerBlock,
    DropdownBlock,
    HeadingBlock,
    HyperlinkBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    RawHTMLBlock,
    SingleCheckboxBlock,
    TableBlock,
    TextareaBlock,
    TextInputBlock,
)
from ..core.config import MAX_UNWRAP_DEPTH
from .classifier import element_children, is_layout_table
from .styles import (
    element_style,
    extract_base_styles,
    is_color,
    parse_float,
    parse_font_weight,
    parse_length,
    parse_percent_width,
)

log = logging.getLogger(__name__)

_NON_TEXT = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

IGNORED_TAGS = {
    "script", "style", "meta", "link", "title", "head", "base",
    "noscript", "template", "br", "wbr",
}
CONTAINER_TAGS = {
    "div", "span", "section", "article", "main", "header", "footer", "center", "font",
}
INLINE_TAGS = {
    "b", "i", "u", "em", "strong", "span", "a", "br", "small", "mark", "sub", "sup",
    "del", "ins", "font", "abbr", "cite", "code", "time", "s", "strike", "img",
}
BLOCK_LEVEL_TAGS = [
    "p", "div", "table", "ul", "ol", "dl", "h1", "h2", "h3", "h4", "h5", "h6",
    "section", "article", "header", "footer", "main", "nav", "aside", "form",
    "fieldset", "blockquote", "pre", "hr", "input", "select", "textarea",
]
MAX_COLSPAN = 1000
MAX_ROWSPAN = 65534
TEXT_INPUT_TYPES = {
    "text": "none", "email": "email", "tel": "phone", "number": "number",
    "url": "url", "search": "none", "password": "none",
}


class MapContext:
    """Accumulateur de warnings + profondeur de déballage, propre à un import."""

    def __init__(self, warnings: Optional[List[str]] = None, max_depth: int = MAX_UNWRAP_DEPTH, depth: int = 0):
        self.warnings = warnings if warnings is not None else []
        self.max_depth = max_depth
        self.depth = depth

    def deeper(self) -> "MapContext":
        return MapContext(self.warnings, self.max_depth, self.depth + 1)

    def warn(self, message: str) -> None:
        log.debug("Warning import : %s", message)
        self.warnings.append(message)


# ── Helpers texte / markup ──────────────────────────────────────────────────

def is_text_node(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT)


def clean_text(el: Tag) -> str:
    """Texte de l'élément, espaces normalisés."""
    return " ".join(el.get_text().split())


def has_loose_text(el: Tag) -> bool:
    return any(is_text_node(c) and c.strip() for c in el.children)


def inner_html(el: Tag) -> str:
    return el.decode_contents()


def has_block_descendants(el: Tag) -> bool:
    return el.find(BLOCK_LEVEL_TAGS) is not None


def _inline_html(el: Tag) -> Optional[str]:
    """Markup interne seulement s'il porte des marques inline."""
    return inner_html(el).strip() if element_children(el) else None


def _int_attr(el: Tag, name: str, default: int = 1) -> int:
    v = parse_length(el.get(name))
    return v if v is not None else default


def _line_height(value: Optional[str]) -> Optional[float]:
    # valeur sans unité uniquement (1.4) — '24px' n'est pas un ratio
    if value and re.fullmatch(r"\d+(?:\.\d+)?", value.strip()):
        return float(value)
    return None


def _text_align(el: Tag, style: Dict[str, str]) -> Optional[str]:
    align = style.get("text-align") or el.get("align")
    return align.strip().lower() if align else None


# ── Construction ───────────────────────────────────────────────────────────

def wrap_raw(el: Tag, ctx: MapContext, warning: Optional[str] = None) -> RawHTMLBlock:
    """Préserve l'élément entier, markup intact (aucune extraction de style)."""
    if warning:
        ctx.warn(warning)
    return RawHTMLBlock(html=str(el))


def _build(cls, el: Tag, ctx: MapContext, **fields) -> BaseBlock:
    """Instancie la variante : défauts < style extrait < champs propres au type."""
    values = extract_base_styles(el)
    values.update({k: v for k, v in fields.items() if v is not None})
    try:
        return cls(**values)
    except ValidationError as e:
        log.debug("Bloc %s invalide (%s)", cls.__name__, e.error_count())
        return wrap_raw(el, ctx, f"Could not map <{el.name}> to {cls.model_fields['type'].default}; preserved as raw HTML")


def map_element(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    """Point d'entrée : un élément → zéro ou un bloc."""
    handler = _TAG_HANDLERS.get(el.name, _map_unknown)
    return handler(el, ctx)


def map_node(node, ctx: MapContext) -> Optional[BaseBlock]:
    """Élément → mapper ; texte nu → paragraphe ; commentaires ignorés."""
    if isinstance(node, Tag):
        return map_element(node, ctx)
    if is_text_node(node) and node.strip():
        return ParagraphBlock(text=" ".join(node.split()))
    return None


def map_children(el: Tag, ctx: MapContext) -> List[BaseBlock]:
    """Mappe chaque enfant indépendamment."""
    blocks = (map_node(node, ctx) for node in el.children)
    return [b for b in blocks if b is not None]


# ── Handlers ───────────────────────────────────────────────────────────────

def _map_ignored(el: Tag, ctx: MapContext) -> None:
    return None


def _map_unknown(el: Tag, ctx: MapContext) -> RawHTMLBlock:
    return wrap_raw(el, ctx, f"Unrecognized element <{el.name}> preserved as raw HTML")


def _map_heading(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    if has_block_descendants(el):
        return wrap_raw(el, ctx, f"<{el.name}> contains block-level markup; preserved as raw HTML")
    text = clean_text(el)
    if not text:
        return _map_container(el, ctx) if element_children(el) else None
    style = element_style(el)
    return _build(
        HeadingBlock, el, ctx,
        level=int(el.name[1]),
        text=text,
        html=_inline_html(el),
        color=style.get("color"),
        font_size=parse_length(style.get("font-size")),
        font_weight=parse_font_weight(style.get("font-weight")),
        text_align=_text_align(el, style),
        line_height=_line_height(style.get("line-height")),
    )


def _paragraph(el: Tag, ctx: MapContext) -> BaseBlock:
    style = element_style(el)
    return _build(
        ParagraphBlock, el, ctx,
        text=clean_text(el),
        html=_inline_html(el),
        color=style.get("color"),
        font_size=parse_length(style.get("font-size")),
        font_weight=parse_font_weight(style.get("font-weight")),
        text_align=_text_align(el, style),
        line_height=_line_height(style.get("line-height")),
    )


def _map_paragraph(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    if has_block_descendants(el):
        return wrap_raw(el, ctx, f"<{el.name}> contains block-level markup; preserved as raw HTML")
    if not clean_text(el):
        # <p><img></p>, <p><br></p> … → règles de conteneur
        return _map_container(el, ctx) if element_children(el) else None
    return _paragraph(el, ctx)


def _map_container(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    children = element_children(el)
    loose = has_loose_text(el)

    if not children:
        return _paragraph(el, ctx) if loose else None

    if len(children) == 1 and not loose:
        if ctx.depth >= ctx.max_depth:
            return wrap_raw(el, ctx, f"Nesting deeper than {ctx.max_depth} levels preserved as raw HTML")
        return map_element(children[0], ctx.deeper())

    if len(children) == 1 and children[0].name in INLINE_TAGS and not has_block_descendants(el):
        return _paragraph(el, ctx)

    return wrap_raw(el, ctx, f"Ambiguous <{el.name}> container with {len(children)} children preserved as raw HTML")


def _map_link(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    text = clean_text(el)
    if not text:
        return _map_container(el, ctx) if element_children(el) else None
    if has_block_descendants(el):
        return wrap_raw(el, ctx, "<a> contains block-level markup; preserved as raw HTML")
    style = element_style(el)
    decoration = style.get("text-decoration", "")
    return _build(
        HyperlinkBlock, el, ctx,
        text=text,
        url=el.get("href") or "#",
        open_in_new_tab=(el.get("target") == "_blank"),
        underline="none" not in decoration.lower(),
        color=style.get("color"),
        font_size=parse_length(style.get("font-size")),
        font_weight=parse_font_weight(style.get("font-weight")),
        text_align=_text_align(el, style),
        line_height=_line_height(style.get("line-height")),
    )


def _divider_border(style: Dict[str, str]) -> Tuple[Optional[int], Optional[str], Optional[str]]:
    """(épaisseur, style, couleur) depuis border-top / border / height."""
    thickness = line = color = None
    for key in ("border-top", "border"):
        if key not in style:
            continue
        for token in style[key].split():
            t = token.lower()
            if t in ("solid", "dashed", "dotted"):
                line = t
            elif is_color(token):
                color = token
            elif parse_length(token) is not None:
                thickness = parse_length(token)
        break
    if thickness is None:
        thickness = parse_length(style.get("border-top-width")) or parse_length(style.get("height"))
    color = color or (style.get("border-top-color") if is_color(style.get("border-top-color", "")) else None)
    return thickness, line, color


def _map_divider(el: Tag, ctx: MapContext) -> BaseBlock:
    thickness, line, color = _divider_border(element_style(el))
    if thickness is None and el.get("size"):
        thickness = parse_length(el.get("size"))
    if color is None and is_color(el.get("color", "")):
        color = el.get("color")
    return _build(DividerBlock, el, ctx, thickness=thickness, style=line, color=color)


def _map_image(el: Tag, ctx: MapContext) -> BaseBlock:
    align = (el.get("align") or "").lower()
    alignment = {"left": "left", "right": "right", "center": "center", "middle": "center"}.get(align)
    return _build(
        ImageBlock, el, ctx,
        src=el.get("src") or "",
        alt=el.get("alt") or "",
        alignment=alignment,
        max_height=parse_length(element_style(el).get("max-height")),
    )


def _field_name(el: Tag) -> Optional[str]:
    return el.get("name") or el.get("id") or None


def _field_label(el: Tag, default: str) -> str:
    return el.get("aria-label") or el.get("title") or el.get("placeholder") or default


def _input_type(el: Tag) -> str:
    return (el.get("type") or "text").strip().lower()


def _map_input(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    kind = _input_type(el)
    if kind == "radio":
        # regroupement des radios non géré : aucun bloc
        log.debug("Input radio ignoré (name=%s)", el.get("name"))
        return None
    if kind == "checkbox":
        return _build(
            SingleCheckboxBlock, el, ctx,
            label=_field_label(el, el.get("value") or "Checkbox"),
            required=el.has_attr("required"),
            field_name=_field_name(el),
            checked=el.has_attr("checked"),
        )
    if kind == "date":
        return _build(
            DatePickerBlock, el, ctx,
            label=_field_label(el, "Date"),
            required=el.has_attr("required"),
            field_name=_field_name(el),
        )
    if kind in ("submit", "button", "reset"):
        return _build(
            ButtonBlock, el, ctx,
            label=el.get("value") or kind.capitalize(),
            button_type=kind,
        )
    if kind in TEXT_INPUT_TYPES:
        return _build(
            TextInputBlock, el, ctx,
            label=_field_label(el, "Field"),
            placeholder=el.get("placeholder") or "",
            required=el.has_attr("required"),
            field_name=_field_name(el),
            validation_type=TEXT_INPUT_TYPES[kind],
            max_length=el.get("maxlength") or "",
        )
    return wrap_raw(el, ctx, f'Unsupported <input type="{kind}"> preserved as raw HTML')


def _map_textarea(el: Tag, ctx: MapContext) -> BaseBlock:
    return _build(
        TextareaBlock, el, ctx,
        label=_field_label(el, "Text Area"),
        placeholder=el.get("placeholder") or "",
        required=el.has_attr("required"),
        field_name=_field_name(el),
        rows=parse_length(el.get("rows")),
        max_length=el.get("maxlength") or "",
        default_value=el.get_text(),
    )


def _map_select(el: Tag, ctx: MapContext) -> BaseBlock:
    options: List[str] = []
    default = ""
    for opt in el.find_all("option"):
        if opt.get("value") == "":
            continue  # invite "Choisir…"
        label = clean_text(opt) or opt.get("value") or ""
        if not label:
            continue
        options.append(label)
        if opt.has_attr("selected"):
            default = label
    return _build(
        DropdownBlock, el, ctx,
        label=_field_label(el, "Dropdown"),
        required=el.has_attr("required"),
        field_name=_field_name(el),
        options=options,
        default_value=default,
    )


def _map_button(el: Tag, ctx: MapContext) -> BaseBlock:
    classes = set(el.get("class") or [])
    variant = "primary"
    if classes & {"btn-secondary", "btn-cancel"}:
        variant = "secondary"
    elif classes & {"btn-outline", "btn-save"}:
        variant = "outline"
    kind = (el.get("type") or "button").lower()
    return _build(
        ButtonBlock, el, ctx,
        label=clean_text(el) or "Button",
        button_type=kind if kind in ("submit", "reset") else "button",
        variant=variant,
    )


def _find_input(el: Tag, kind: str) -> Optional[Tag]:
    return el.find(lambda t: t.name == "input" and _input_type(t) == kind)


def _map_label(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    if _find_input(el, "radio") is not None:
        return None
    checkbox = _find_input(el, "checkbox")
    if checkbox is not None:
        return _build(
            SingleCheckboxBlock, el, ctx,
            label=clean_text(el) or "Checkbox",
            required=checkbox.has_attr("required"),
            field_name=_field_name(checkbox),
            checked=checkbox.has_attr("checked"),
        )
    return _map_paragraph(el, ctx)


def _map_list(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    stray = has_loose_text(el) or any(c.name != "li" for c in element_children(el))
    if stray:
        return wrap_raw(el, ctx, f"<{el.name}> with content outside list items preserved as raw HTML")
    items = [clean_text(li) for li in element_children(el) if li.name == "li"]
    if not items:
        return None
    return _build(
        ListBlock, el, ctx,
        list_type="ordered" if el.name == "ol" else "unordered",
        items=items,
    )


# ── Tables de données ──────────────────────────────────────────────────────

def table_rows(table: Tag) -> List[Tag]:
    """Lignes directes : table > tr, table > thead|tbody|tfoot > tr."""
    rows: List[Tag] = []
    for child in element_children(table):
        if child.name == "tr":
            rows.append(child)
        elif child.name in ("thead", "tbody", "tfoot"):
            rows.extend(r for r in element_children(child) if r.name == "tr")
    return rows


def row_cells(tr: Tag) -> List[Tag]:
    return [c for c in element_children(tr) if c.name in ("td", "th")]


def cell_text(cell: Tag) -> str:
    """Texte de cellule : <br>/<p>/<div> → retours à la ligne, <li> → puces."""
    parts: List[str] = []

    def newline():
        if parts and not parts[-1].endswith("\n"):
            parts.append("\n")

    def walk(node):
        if is_text_node(node):
            parts.append(re.sub(r"\s+", " ", str(node)))
            return
        if not isinstance(node, Tag):
            return
        if node.name == "br":
            parts.append("\n")
        elif node.name == "li":
            newline()
            parts.append("• " + clean_text(node) + "\n")
        elif node.name in ("p", "div", "ul", "ol", "tr"):
            newline()
            for c in node.children:
                walk(c)
            parts.append("\n")
        else:
            for c in node.children:
                walk(c)

    for c in cell.children:
        walk(c)
    lines = [line.strip() for line in "".join(parts).split("\n")]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def _span(cell: Tag, name: str, limit: int) -> int:
    # bornes HTML : colspan ≤ 1000, rowspan ≤ 65534
    return min(max(_int_attr(cell, name), 1), limit)


def _expand_grid(rows: List[Tag]) -> List[List[str]]:
    """colspan/rowspan → cellules vides pour garder une grille rectangulaire."""
    pending: Dict[int, int] = {}
    grid: List[List[str]] = []
    for tr in rows:
        out: List[str] = []
        col = 0
        for cell in row_cells(tr):
            while pending.get(col, 0) > 0:
                pending[col] -= 1
                out.append("")
                col += 1
            colspan = _span(cell, "colspan", MAX_COLSPAN)
            rowspan = _span(cell, "rowspan", MAX_ROWSPAN)
            out.append(cell_text(cell))
            out.extend([""] * (colspan - 1))
            if rowspan > 1:
                for c in range(col, col + colspan):
                    pending[c] = rowspan - 1
            col += colspan
        while pending.get(col, 0) > 0:
            pending[col] -= 1
            out.append("")
            col += 1
        if out:
            grid.append(out)
    width = max((len(r) for r in grid), default=0)
    return [r + [""] * (width - len(r)) for r in grid]


def _column_widths(table: Tag, rows: List[Tag], ncols: int) -> Optional[List[float]]:
    widths: List[float] = []
    colgroup = table.find("colgroup")
    if colgroup is not None:
        for col in colgroup.find_all("col"):
            w = parse_percent_width(element_style(col).get("width") or col.get("width"))
            if w:
                widths.append(float(w))
    if len(widths) != ncols and rows:
        widths = []
        for cell in row_cells(rows[0]):
            raw = element_style(cell).get("width") or cell.get("width") or ""
            span = _span(cell, "colspan", MAX_COLSPAN)
            if not raw.strip().endswith("%"):
                return None
            widths.extend([parse_float(raw) / span] * span)
    if len(widths) == ncols and all(w > 0 for w in widths):
        return widths
    return None


def _map_table(el: Tag, ctx: MapContext) -> Optional[BaseBlock]:
    if is_layout_table(el):
        return wrap_raw(el, ctx, "Layout table preserved as raw HTML")
    caption = el.find("caption", recursive=False)
    if caption is not None and clean_text(caption):
        return wrap_raw(el, ctx, "Table caption cannot be represented; table preserved as raw HTML")

    rows = table_rows(el)
    grid = _expand_grid(rows)
    if not grid:
        return wrap_raw(el, ctx, "Table without rows preserved as raw HTML") if clean_text(el) else None

    first = rows[0]
    explicit_header = first.parent.name == "thead" or any(c.name == "th" for c in row_cells(first))
    bordered = (parse_length(el.get("border")) or 0) > 0 if el.has_attr("border") else True
    return _build(
        TableBlock, el, ctx,
        headers=grid[0],
        rows=grid[1:],
        header_row=explicit_header,
        bordered=bordered,
        column_widths=_column_widths(el, rows, len(grid[0])),
    )


# ── Table de dispatch ──────────────────────────────────────────────────────

Handler = Callable[[Tag, MapContext], Optional[BaseBlock]]

_TAG_HANDLERS: Dict[str, Handler] = {
    **{tag: _map_ignored for tag in IGNORED_TAGS},
    **{tag: _map_container for tag in CONTAINER_TAGS},
    **{f"h{n}": _map_heading for n in range(1, 7)},
    "p":        _map_paragraph,
    "b":        _map_paragraph,
    "strong":   _map_paragraph,
    "i":        _map_paragraph,
    "em":       _map_paragraph,
    "u":        _map_paragraph,
    "small":    _map_paragraph,
    "a":        _map_link,
    "hr":       _map_divider,
    "img":      _map_image,
    "input":    _map_input,
    "textarea": _map_textarea,
    "select":   _map_select,
    "button":   _map_button,
    "label":    _map_label,
    "ul":       _map_list,
    "ol":       _map_list,
    "table":    _map_table,
}

SUPPORTED_TAGS = frozenset(_TAG_HANDLERS)
