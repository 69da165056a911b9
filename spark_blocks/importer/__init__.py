"""Import HTML → blocs."""
from .pipeline import import_html, detect_features
from .sanitizer import sanitize_html, has_dangerous_content
from .classifier import classify_layout, is_layout_table
from .mapper import MapContext, map_element
from .styles import extract_base_styles
from .roundtrip import extract_metadata, has_metadata, metadata_comment

__all__ = [
    "import_html",
    "detect_features",
    "sanitize_html",
    "has_dangerous_content",
    "classify_layout",
    "is_layout_table",
    "MapContext",
    "map_element",
    "extract_base_styles",
    "extract_metadata",
    "has_metadata",
    "metadata_comment",
]
