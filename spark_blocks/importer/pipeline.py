"""
Pipeline d'import HTML → sections.

  1. Round-trip : commentaire spark-metadata valide → sections telles quelles
  2. sanitize (collaborateur remplaçable) + parsing BeautifulSoup
  3. Classifier → un des trois Layout Parsers → Mapper → Style Extractor

Ne lève jamais pour une entrée str : tout échec dégrade en raw-html + warning.
"""
import logging
import re
from typing import Callable, List, Optional

from bs4 import BeautifulSoup

from ..blocks import RawHTMLBlock
from ..core.config import EDITOR_VERSION_ATTR, ImportOptions
from ..core.schemas import DocumentFeatures, ImportResult, Section, make_section
from .classifier import classify_layout
from .layouts import LAYOUT_PARSERS
from .mapper import MapContext
from .roundtrip import extract_metadata
from .sanitizer import sanitize_html

log = logging.getLogger(__name__)

_VERSION_RE = re.compile(EDITOR_VERSION_ATTR + r"""\s*=\s*["']([^"']*)["']""", re.IGNORECASE)

NO_BLOCKS_WARNING = "No blocks could be extracted from the document"


def detect_features(soup: BeautifulSoup) -> DocumentFeatures:
    styles = soup.find_all("style")
    return DocumentFeatures(
        has_styles=bool(styles) or soup.find(style=True) is not None,
        has_tables=soup.find("table") is not None,
        has_lists=soup.find(["ul", "ol"]) is not None,
        has_forms=soup.find(["form", "input", "select", "textarea"]) is not None,
        style_content="\n".join(s.get_text() for s in styles).strip(),
    )


def _block_count(sections: List[Section]) -> int:
    return sum(1 for s in sections for _ in s.iter_blocks())


def import_html(
    html: str,
    sanitize: Callable[[str], str] = sanitize_html,
    options: Optional[ImportOptions] = None,
) -> ImportResult:
    """HTML quelconque → ImportResult (sections + warnings non bloquants)."""
    options = options or ImportOptions()
    html = html or ""
    warnings: List[str] = []

    m = _VERSION_RE.search(html)
    editor_version = m.group(1) if m else None

    metadata = extract_metadata(html, warnings)
    if metadata is not None:
        log.info("Import round-trip : %d sections (version %s)", len(metadata.sections), metadata.version)
        return ImportResult(
            sections=metadata.sections,
            layout="metadata",
            is_editor_generated=True,
            version=metadata.version,
            features=detect_features(BeautifulSoup(sanitize(html), "html.parser")),
        )

    if not html.strip():
        return ImportResult(warnings=warnings, layout="empty")

    soup = BeautifulSoup(sanitize(html), "html.parser")
    root = soup.body or soup.html or soup
    ctx = MapContext(warnings, options.max_unwrap_depth)

    layout = classify_layout(root)
    try:
        sections = LAYOUT_PARSERS[layout](root, ctx, options)
    except Exception:
        log.exception("Import heuristique interrompu (layout=%s)", layout)
        ctx.warn("Unexpected error while parsing; whole body preserved as raw HTML")
        markup = root.decode_contents()
        sections = [make_section([[RawHTMLBlock(html=markup)]])] if markup.strip() else []

    if _block_count(sections) == 0:
        ctx.warn(NO_BLOCKS_WARNING)

    log.info("Import %s : %d sections, %d blocs, %d warnings",
             layout, len(sections), _block_count(sections), len(warnings))
    return ImportResult(
        sections=sections,
        warnings=warnings,
        layout=layout,
        is_editor_generated=editor_version is not None,
        version=editor_version,
        features=detect_features(soup),
    )
