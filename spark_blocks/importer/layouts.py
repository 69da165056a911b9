"""
Layout Parsers — document classifié → sections/colonnes.

  section      : conteneurs marqués (data-editor-section, data-section, .spark-section)
  table-email  : une section par ligne de table, une colonne par cellule (≤ 3)
  generic      : blocs à plat, regroupés par SECTION_CHUNK_SIZE
"""
import logging
import re
from typing import List, Optional

from bs4 import Tag

from ..blocks import BaseBlock, ParagraphBlock, RawHTMLBlock
from ..core.config import EDITOR_BLOCK_TYPE_ATTR, MAX_COLUMNS, SECTION_ID_ATTR, ImportOptions
from ..core.schemas import Section, make_section
from .classifier import element_children, is_column_marker, is_layout_table, is_section_marker
from .mapper import MapContext, clean_text, map_children, map_node, row_cells, table_rows
from .restore import restore_block

log = logging.getLogger(__name__)

_BLANK_RE = re.compile(r"[\s\u00a0\u200b\u200c\u200d\ufeff]+")
_CONTENT_TAGS = ["img", "input", "select", "textarea", "button"]


def chunk_sections(blocks: List[BaseBlock], size: int) -> List[Section]:
    """Blocs à plat → sections mono-colonne de `size` blocs."""
    return [make_section([blocks[i:i + size]]) for i in range(0, len(blocks), size)]


# ── Section layout ─────────────────────────────────────────────────────────

def _is_marker(el: Tag) -> bool:
    return is_section_marker(el) or is_column_marker(el)


def _owner(el: Tag) -> Optional[Tag]:
    """Conteneur marqué le plus proche au-dessus de `el`."""
    for parent in el.parents:
        if isinstance(parent, Tag) and _is_marker(parent):
            return parent
    return None


def _section_columns(section: Tag) -> List[Tag]:
    if is_column_marker(section):
        return [section]
    columns = [c for c in section.find_all(is_column_marker) if _owner(c) is section]
    return columns or [section]


def _column_blocks(column: Tag, ctx: MapContext) -> List[BaseBlock]:
    blocks: List[BaseBlock] = []
    for node in column.children:
        block = None
        if isinstance(node, Tag) and node.has_attr(EDITOR_BLOCK_TYPE_ATTR):
            block = restore_block(node, ctx.warnings)
        if block is None:
            block = map_node(node, ctx)
        if block is not None:
            blocks.append(block)
    return blocks


def _column_section(section: Tag, columns: List[Tag], ctx: MapContext) -> Section:
    if len(columns) > MAX_COLUMNS:
        ctx.warn(f"Section with {len(columns)} columns: columns beyond {MAX_COLUMNS} ignored")
        columns = columns[:MAX_COLUMNS]
    return make_section([_column_blocks(c, ctx) for c in columns], section.get(SECTION_ID_ATTR))


def _parse_section(section: Tag, ctx: MapContext, options: ImportOptions) -> List[Section]:
    """
    Une section marquée → ses sections, dans l'ordre du document.
    Le contenu hors colonnes (intro, note de bas…) devient des sections
    mono-colonne avant/après le groupe de colonnes ; une section imbriquée
    est traitée pour elle-même.
    """
    columns = _section_columns(section)
    if columns == [section]:
        return [_column_section(section, columns, ctx)]

    sections: List[Section] = []
    loose: List[BaseBlock] = []
    placed = False

    def flush():
        sections.extend(chunk_sections(loose, options.section_chunk_size))
        loose.clear()

    def walk(parent: Tag):
        nonlocal placed
        for node in parent.children:
            if isinstance(node, Tag) and is_column_marker(node):
                if not placed:
                    flush()
                    sections.append(_column_section(section, columns, ctx))
                    placed = True
            elif isinstance(node, Tag) and is_section_marker(node):
                flush()
                sections.extend(_parse_section(node, ctx, options))
            elif isinstance(node, Tag) and node.find(_is_marker) is not None:
                walk(node)
            else:
                block = map_node(node, ctx)
                if block is not None:
                    loose.append(block)

    walk(section)
    flush()
    return sections


def parse_section_layout(root: Tag, ctx: MapContext, options: ImportOptions) -> List[Section]:
    sections: List[Section] = []
    loose: List[BaseBlock] = []

    def flush():
        sections.extend(chunk_sections(loose, options.section_chunk_size))
        loose.clear()

    def walk(parent: Tag):
        for node in parent.children:
            if isinstance(node, Tag) and _is_marker(node):
                flush()
                sections.extend(_parse_section(node, ctx, options))
            elif isinstance(node, Tag) and node.find(_is_marker) is not None:
                # wrapper transparent (<form>, <main>…) autour des sections
                walk(node)
            else:
                block = map_node(node, ctx)
                if block is not None:
                    loose.append(block)

    walk(root)
    flush()
    return sections


# ── Table-email layout ─────────────────────────────────────────────────────

def is_empty_cell(cell: Tag) -> bool:
    """Cellule d'espacement : texte blanc (NBSP, zero-width inclus) et aucun média/contrôle."""
    if _BLANK_RE.sub("", cell.get_text()):
        return False
    return cell.find(_CONTENT_TAGS) is None


def is_layout_grid(table: Tag) -> bool:
    """Table de mise en page, ou table qui en emballe une ; les autres restent des tables de données."""
    return is_layout_table(table) or any(is_layout_table(t) for t in table.find_all("table"))


def _nested_layout_table(cell: Tag) -> Optional[Tag]:
    children = element_children(cell)
    if len(children) == 1 and children[0].name == "table" and is_layout_table(children[0]):
        return children[0]
    return None


def layout_rows(table: Tag) -> List[Tag]:
    """Lignes de la table ; une ligne qui n'emballe qu'une table de layout est dépliée."""
    rows: List[Tag] = []
    for tr in table_rows(table):
        filled = [c for c in row_cells(tr) if not is_empty_cell(c)]
        nested = _nested_layout_table(filled[0]) if len(filled) == 1 else None
        if nested is not None:
            rows.extend(layout_rows(nested))
        else:
            rows.append(tr)
    return rows


def _cell_blocks(cell: Tag, ctx: MapContext) -> List[BaseBlock]:
    if not element_children(cell):
        text = clean_text(cell)
        return [ParagraphBlock(text=text)] if text else []
    return map_children(cell, ctx)


def _row_section(tr: Tag, ctx: MapContext) -> Optional[Section]:
    cells = row_cells(tr)
    if all(is_empty_cell(c) for c in cells):
        log.debug("Ligne d'espacement ignorée")
        return None
    if len(cells) > MAX_COLUMNS:
        ctx.warn(f"Table row with {len(cells)} cells: cells beyond {MAX_COLUMNS} dropped")
        cells = cells[:MAX_COLUMNS]
    columns = [_cell_blocks(c, ctx) for c in cells]
    if not any(columns):
        return None
    return make_section(columns)


def parse_table_email_layout(root: Tag, ctx: MapContext, options: ImportOptions) -> List[Section]:
    sections: List[Section] = []
    loose: List[BaseBlock] = []

    def flush():
        sections.extend(chunk_sections(loose, options.section_chunk_size))
        loose.clear()

    for node in root.children:
        if isinstance(node, Tag) and node.name == "table" and is_layout_grid(node):
            flush()
            for tr in layout_rows(node):
                section = _row_section(tr, ctx)
                if section is not None:
                    sections.append(section)
        else:
            block = map_node(node, ctx)
            if block is not None:
                loose.append(block)
    flush()
    return sections


# ── Generic layout ─────────────────────────────────────────────────────────

def parse_generic_layout(root: Tag, ctx: MapContext, options: ImportOptions) -> List[Section]:
    blocks = map_children(root, ctx)
    if blocks:
        return chunk_sections(blocks, options.section_chunk_size)
    markup = root.decode_contents()
    if not markup.strip():
        return []
    ctx.warn("No content could be mapped to blocks; whole body preserved as raw HTML")
    return [make_section([[RawHTMLBlock(html=markup)]])]


LAYOUT_PARSERS = {
    "section":     parse_section_layout,
    "table-email": parse_table_email_layout,
    "generic":     parse_generic_layout,
}
