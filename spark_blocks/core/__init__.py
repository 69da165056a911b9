"""Core module pour spark_blocks."""
from .config import ImportOptions
from .schemas import (
    Section,
    Document,
    SparkMetadata,
    DocumentFeatures,
    ImportResult,
    LayoutKind,
    make_section,
)

__all__ = [
    "ImportOptions",
    "Section",
    "Document",
    "SparkMetadata",
    "DocumentFeatures",
    "ImportResult",
    "LayoutKind",
    "make_section",
]
