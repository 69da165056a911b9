"""
Round-Trip Detector — commentaire <!-- spark-metadata: {...} --> embarqué par export_html.

Métadonnées valides → sections reconstruites telles quelles, zéro warning.
Présentes mais corrompues → un warning, l'appelant repasse en heuristique.
"""
import json
import logging
import re
from typing import List, Optional

from pydantic import ValidationError

from ..core.config import METADATA_MARKER
from ..core.schemas import SparkMetadata

log = logging.getLogger(__name__)

METADATA_RE = re.compile(r"<!--\s*" + re.escape(METADATA_MARKER) + r":\s*(.*?)\s*-->", re.DOTALL)

INVALID_METADATA_WARNING = "metadata found but invalid"


def metadata_comment(metadata: SparkMetadata) -> str:
    """Commentaire HTML portant le document ; '>' échappé pour ne jamais fermer le commentaire."""
    payload = json.dumps(metadata.model_dump(mode="json", by_alias=True), ensure_ascii=False)
    payload = payload.replace(">", "\\u003e")
    return f"<!-- {METADATA_MARKER}: {payload} -->"


def has_metadata(html: str) -> bool:
    return METADATA_RE.search(html or "") is not None


def extract_metadata(html: str, warnings: List[str]) -> Optional[SparkMetadata]:
    """Dernier commentaire du document : celui ajouté par export_html après </html>."""
    matches = list(METADATA_RE.finditer(html or ""))
    if not matches:
        return None
    m = matches[-1]
    try:
        return SparkMetadata.model_validate(json.loads(m.group(1)))
    except (ValueError, ValidationError) as e:
        log.warning("Métadonnées %s invalides : %s", METADATA_MARKER, str(e)[:200])
        warnings.append(INVALID_METADATA_WARNING)
        return None
