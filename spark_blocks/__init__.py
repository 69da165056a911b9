"""
spark_blocks — import/export structurel HTML ↔ blocs (sections, colonnes, blocs typés).

    from spark_blocks import import_html, export_html
    result = import_html("<h1>Hi</h1><p>World</p>")
    html = export_html(result.sections)
"""
__version__ = "1.0.0"

from .core import Document, ImportOptions, ImportResult, Section, make_section
from .importer import import_html, sanitize_html
from .renderer import export_body_html, export_html

__all__ = [
    "__version__",
    "Document",
    "ImportOptions",
    "ImportResult",
    "Section",
    "make_section",
    "import_html",
    "sanitize_html",
    "export_html",
    "export_body_html",
]
