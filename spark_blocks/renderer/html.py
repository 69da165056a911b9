"""
Serializer — sections → HTML, inverse de l'importer.

Chaque bloc porte :
  - du CSS inline reflétant ses champs de style (marges, padding, fond, bordure)
  - data-block-id / data-block-type + un data-<champ> par champ structuré,
    relus par importer.restore si le commentaire spark-metadata est absent.
export_html ajoute le commentaire spark-metadata (round-trip garanti).
"""
import html
import json
from typing import Any, List

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
    field_attr,
)
from ..core.config import (
    EDITOR_BLOCK_ID_ATTR,
    EDITOR_BLOCK_TYPE_ATTR,
    EDITOR_COLUMN_ATTR,
    EDITOR_LAYOUT_ATTR,
    EDITOR_SECTION_ATTR,
    EDITOR_VERSION,
    EDITOR_VERSION_ATTR,
    METADATA_VERSION,
    SECTION_ID_ATTR,
)
from ..core.schemas import Section, SparkMetadata
from ..importer.roundtrip import metadata_comment
from ..placeholders import highlight_placeholders
from .assets import STYLESHEET, VALIDATION_SCRIPT

SECTION_GAP = 24
INPUT_TYPES = {"none": "text", "email": "email", "phone": "tel", "number": "number", "url": "url"}
FIELD_STYLE = "width: 100%; padding: 8px 12px; border: 1px solid #e2e8f0; border-radius: 6px; font-size: 14px;"
LABEL_STYLE = "display: block; font-size: 14px; font-weight: 500; margin-bottom: 6px;"
BUTTON_VARIANTS = {
    "primary":   "background-color: #3b82f6; color: white; border: none;",
    "secondary": "background-color: #f1f5f9; color: #1e293b; border: none;",
    "outline":   "background-color: transparent; color: #1e293b; border: 1px solid #e2e8f0;",
}


def _esc(value: Any) -> str:
    return html.escape(str(value), quote=True)


def _data_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def block_attrs(block: BaseBlock, with_fields: bool = True) -> str:
    """data-block-id, data-block-type et (sauf raw-html) un data-* par champ."""
    attrs = [(EDITOR_BLOCK_ID_ATTR, block.id), (EDITOR_BLOCK_TYPE_ATTR, block.type)]
    if with_fields:
        for name in type(block).model_fields:
            value = getattr(block, name)
            if name in ("id", "type") or value is None:
                continue
            attrs.append((field_attr(name), _data_value(value)))
    return " ".join(f'{k}="{_esc(v)}"' for k, v in attrs)


def box_style(block: BaseBlock) -> str:
    """CSS inline des champs de BaseBlock."""
    b = block
    parts = [f"margin: {b.margin_top}px {b.margin_right}px {b.margin_bottom}px {b.margin_left}px;"]
    if b.padding_x or b.padding_y:
        parts.append(f"padding: {b.padding_y}px {b.padding_x}px;")
    if b.background_color:
        parts.append(f"background-color: {b.background_color};")
    if b.border_width:
        parts.append(f"border: {b.border_width}px solid {b.border_color or '#e2e8f0'};")
    if b.border_radius:
        parts.append(f"border-radius: {b.border_radius}px;")
    if b.width < 100:
        parts.append(f"width: {b.width}%;")
    return " ".join(parts)


def _text_content(text: str, markup=None) -> str:
    # marques inline conservées telles quelles, sinon texte échappé + placeholders
    return markup if markup else highlight_placeholders(text)


def _typography(b) -> str:
    color = f" color: {b.color};" if b.color else ""
    return (f"font-size: {b.font_size}px; font-weight: {b.font_weight}; "
            f"text-align: {b.text_align}; line-height: {b.line_height};{color}")


def _label(b, for_id: bool = True) -> str:
    star = ' <span style="color: #ef4444;">*</span>' if b.required else ""
    for_attr = f' for="{_esc(b.field_name)}"' if for_id else ""
    return f'<label{for_attr} style="{LABEL_STYLE}">{_esc(b.label)}{star}</label>'


def _help(b) -> str:
    return f'\n  <small class="field-help">{_esc(b.help_text)}</small>' if b.help_text else ""


def _required(b) -> str:
    return " required" if b.required else ""


# ── Renderers par type ──────────────────────────────────────────────────────

def render_heading_block(b: HeadingBlock) -> str:
    tag = f"h{b.level}"
    return (f'<{tag} {block_attrs(b)} style="{_typography(b)} {box_style(b)}">'
            f'{_text_content(b.text, b.html)}</{tag}>')


def render_paragraph_block(b: ParagraphBlock) -> str:
    return f'<p {block_attrs(b)} style="{_typography(b)} {box_style(b)}">{_text_content(b.text, b.html)}</p>'


def render_hyperlink_block(b: HyperlinkBlock) -> str:
    target = ' target="_blank" rel="noopener noreferrer"' if b.open_in_new_tab else ""
    decoration = "underline" if b.underline else "none"
    link_style = (f"color: {b.color}; font-size: {b.font_size}px; font-weight: {b.font_weight}; "
                  f"line-height: {b.line_height}; text-decoration: {decoration};")
    return (f'<div {block_attrs(b)} style="text-align: {b.text_align}; {box_style(b)}">'
            f'<a href="{_esc(b.url)}"{target} style="{link_style}">{highlight_placeholders(b.text)}</a></div>')


def render_text_input_block(b: TextInputBlock) -> str:
    maxlength = f' maxlength="{_esc(b.max_length)}"' if b.max_length else ""
    return f"""<div {block_attrs(b)} style="{box_style(b)}">
  {_label(b)}
  <input type="{INPUT_TYPES[b.validation_type]}" id="{_esc(b.field_name)}" name="{_esc(b.field_name)}" placeholder="{_esc(b.placeholder)}"{maxlength}{_required(b)} style="{FIELD_STYLE}">{_help(b)}
</div>"""


def render_textarea_block(b: TextareaBlock) -> str:
    maxlength = f' maxlength="{_esc(b.max_length)}"' if b.max_length else ""
    return f"""<div {block_attrs(b)} style="{box_style(b)}">
  {_label(b)}
  <textarea id="{_esc(b.field_name)}" name="{_esc(b.field_name)}" rows="{b.rows}" placeholder="{_esc(b.placeholder)}"{maxlength}{_required(b)} style="{FIELD_STYLE} resize: vertical;">{_esc(b.default_value)}</textarea>{_help(b)}
</div>"""


def render_dropdown_block(b: DropdownBlock) -> str:
    options = "\n    ".join(
        f'<option value="{_esc(opt)}"{" selected" if opt == b.default_value else ""}>{_esc(opt)}</option>'
        for opt in b.options
    )
    return f"""<div {block_attrs(b)} style="{box_style(b)}">
  {_label(b)}
  <select id="{_esc(b.field_name)}" name="{_esc(b.field_name)}"{_required(b)} style="{FIELD_STYLE} background: white;">
    <option value="">Select an option...</option>
    {options}
  </select>{_help(b)}
</div>"""


def render_checkbox_block(b: SingleCheckboxBlock) -> str:
    checked = " checked" if b.checked else ""
    return f"""<div {block_attrs(b)} style="{box_style(b)}">
  <label style="display: flex; align-items: flex-start; gap: 10px; font-size: 14px; line-height: 1.5;">
    <input type="checkbox" name="{_esc(b.field_name)}"{checked}{_required(b)} style="margin-top: 4px; flex-shrink: 0;">
    <span>{highlight_placeholders(b.label)}</span>
  </label>
</div>"""


def render_date_picker_block(b: DatePickerBlock) -> str:
    return f"""<div {block_attrs(b)} style="{box_style(b)}">
  {_label(b)}
  <input type="date" id="{_esc(b.field_name)}" name="{_esc(b.field_name)}"{_required(b)} style="{FIELD_STYLE}">{_help(b)}
</div>"""


def render_divider_block(b: DividerBlock) -> str:
    return (f'<hr {block_attrs(b)} style="border: none; border-top: {b.thickness}px {b.style} {b.color}; '
            f'{box_style(b)}">')


def render_image_block(b: ImageBlock) -> str:
    return (f'<div {block_attrs(b)} style="text-align: {b.alignment}; {box_style(b)}">'
            f'<img src="{_esc(b.src)}" alt="{_esc(b.alt)}" style="max-width: 100%; max-height: {b.max_height}px; '
            f'display: inline-block;"></div>')


def _cell(tag: str, text: str, style: str) -> str:
    return f'<{tag} style="{style}">{highlight_placeholders(text).replace(chr(10), "<br>")}</{tag}>'


def render_table_block(b: TableBlock) -> str:
    border = " border: 1px solid #000;" if b.bordered else ""
    cell_style = f"padding: 8px;{border}"
    lines = [f'<table {block_attrs(b)} style="width: 100%; border-collapse: collapse; {box_style(b)}">']
    if b.column_widths:
        cols = "".join(f'<col style="width: {w:g}%;">' for w in b.column_widths)
        lines.append(f"  <colgroup>{cols}</colgroup>")

    body_rows = list(b.rows)
    if b.header_row:
        heads = "".join(_cell("th", h, cell_style + " font-weight: bold;") for h in b.headers)
        lines.append(f"  <thead><tr>{heads}</tr></thead>")
    elif b.headers:
        body_rows.insert(0, b.headers)

    lines.append("  <tbody>")
    for i, row in enumerate(body_rows):
        stripe = " background-color: #f8fafc;" if b.striped and i % 2 == 1 else ""
        cells = "".join(_cell("td", c, cell_style + stripe) for c in row)
        lines.append(f"    <tr>{cells}</tr>")
    lines.append("  </tbody>")
    lines.append("</table>")
    return "\n".join(lines)


def render_list_block(b: ListBlock) -> str:
    tag = "ol" if b.list_type == "ordered" else "ul"
    list_style = "decimal" if b.list_type == "ordered" else "disc"
    items = "\n".join(f'  <li style="padding: 4px 0;">{highlight_placeholders(i)}</li>' for i in b.items)
    return f'<{tag} {block_attrs(b)} style="list-style-type: {list_style}; padding-left: 24px; {box_style(b)}">\n{items}\n</{tag}>'


def render_button_block(b: ButtonBlock) -> str:
    variant = BUTTON_VARIANTS.get(b.variant, BUTTON_VARIANTS["primary"])
    return (f'<button type="{b.button_type}" {block_attrs(b)} style="padding: 10px 20px; border-radius: 6px; '
            f'font-size: 14px; font-weight: 500; cursor: pointer; {variant} {box_style(b)}">{_esc(b.label)}</button>')


def render_raw_html_block(b: RawHTMLBlock) -> str:
    # payload inséré tel quel, jamais échappé
    return f'<div {block_attrs(b, with_fields=False)} style="{box_style(b)}">{b.html}</div>'


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_block(block: Any) -> str:
    """Dispatch vers le renderer du type de bloc."""
    if isinstance(block, HeadingBlock):        return render_heading_block(block)
    if isinstance(block, ParagraphBlock):      return render_paragraph_block(block)
    if isinstance(block, HyperlinkBlock):      return render_hyperlink_block(block)
    if isinstance(block, TextInputBlock):      return render_text_input_block(block)
    if isinstance(block, TextareaBlock):       return render_textarea_block(block)
    if isinstance(block, DropdownBlock):       return render_dropdown_block(block)
    if isinstance(block, SingleCheckboxBlock): return render_checkbox_block(block)
    if isinstance(block, DatePickerBlock):     return render_date_picker_block(block)
    if isinstance(block, DividerBlock):        return render_divider_block(block)
    if isinstance(block, ImageBlock):          return render_image_block(block)
    if isinstance(block, TableBlock):          return render_table_block(block)
    if isinstance(block, ListBlock):           return render_list_block(block)
    if isinstance(block, ButtonBlock):         return render_button_block(block)
    if isinstance(block, RawHTMLBlock):        return render_raw_html_block(block)

    style = f' style="{box_style(block)}"' if isinstance(block, BaseBlock) else ""
    return f"<div{style}>Unknown block type</div>"


# ── Sections / document ─────────────────────────────────────────────────────

def _column_html(blocks: list) -> str:
    return "\n".join("    " + render_block(b) for b in blocks)


def render_section(section: Section) -> str:
    attrs = (f'{EDITOR_SECTION_ATTR}="true" {EDITOR_LAYOUT_ATTR}="{section.columns}" '
             f'{SECTION_ID_ATTR}="{_esc(section.id)}"')

    # 1 colonne → la section est sa propre colonne
    if section.columns == 1:
        return (f'<div {attrs} {EDITOR_COLUMN_ATTR}="0" style="margin-bottom: {SECTION_GAP}px;">\n'
                f'{_column_html(section.blocks[0])}\n</div>')

    width = f"{100 / section.columns:.4g}%"
    cols = "\n".join(
        f'  <div {EDITOR_COLUMN_ATTR}="{i}" style="width: {width}; padding: 0 8px; box-sizing: border-box;">\n'
        f'{_column_html(col)}\n  </div>'
        for i, col in enumerate(section.blocks)
    )
    return f'<div {attrs} style="display: flex; margin-bottom: {SECTION_GAP}px;">\n{cols}\n</div>'


def export_body_html(sections: List[Section], include_metadata: bool = False) -> str:
    """Markup des sections seul (intégration dans une page hôte)."""
    body = "\n".join(render_section(s) for s in sections)
    if include_metadata:
        body += "\n" + metadata_comment(SparkMetadata(version=METADATA_VERSION, sections=list(sections)))
    return body


def export_html(sections: List[Section], title: str = "Agreement Form", lang: str = "en") -> str:
    """Document HTML complet + commentaire spark-metadata."""
    body = export_body_html(sections)
    meta = metadata_comment(SparkMetadata(version=METADATA_VERSION, sections=list(sections)))
    return f"""<!DOCTYPE html>
<html lang="{_esc(lang)}" {EDITOR_VERSION_ATTR}="{EDITOR_VERSION}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_esc(title)}</title>
  <style>{STYLESHEET}</style>
</head>
<body>
  <form novalidate>
{body}
  </form>
{VALIDATION_SCRIPT}
</body>
</html>
{meta}"""
