"""
Configuration spark_blocks — constantes lues depuis l'environnement.

SPARK_SECTION_CHUNK_SIZE : nombre de blocs par section (layout générique)
SPARK_MAX_UNWRAP_DEPTH   : profondeur max de déballage div/span
SPARK_LOG_LEVEL          : niveau de log des points d'entrée (app, CLI)
"""
import os

from pydantic import BaseModel, Field

SECTION_CHUNK_SIZE = int(os.getenv("SPARK_SECTION_CHUNK_SIZE", "5"))
MAX_UNWRAP_DEPTH   = int(os.getenv("SPARK_MAX_UNWRAP_DEPTH", "64"))
LOG_LEVEL          = os.getenv("SPARK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT         = "%(asctime)s %(levelname)s — %(message)s"

MAX_COLUMNS            = 3
LAYOUT_TABLE_MIN_WIDTH = 400

METADATA_MARKER  = "spark-metadata"
METADATA_VERSION = "1"
EDITOR_VERSION   = "1.0"

# Attributs posés par le serializer (et relus par l'importer)
EDITOR_VERSION_ATTR    = "data-editor-version"
EDITOR_SECTION_ATTR    = "data-editor-section"
EDITOR_COLUMN_ATTR     = "data-editor-column"
EDITOR_LAYOUT_ATTR     = "data-editor-layout"
EDITOR_BLOCK_TYPE_ATTR = "data-block-type"
EDITOR_BLOCK_ID_ATTR   = "data-block-id"
SECTION_ID_ATTR        = "data-section-id"

# Marqueurs de l'ancien serializer + convention de classes
LEGACY_SECTION_ATTR = "data-section"
LEGACY_COLUMN_ATTR  = "data-column"
SECTION_CLASS       = "spark-section"
COLUMN_CLASS        = "spark-column"


class ImportOptions(BaseModel):
    """Surcharges par appel des constantes d'environnement."""
    section_chunk_size: int = Field(default=SECTION_CHUNK_SIZE, ge=1)
    max_unwrap_depth: int = Field(default=MAX_UNWRAP_DEPTH, ge=1)
