"""
Routes /spark — import HTML, export HTML, validation, catalogue des blocs.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ValidationError

from .blocks import BLOCK_REGISTRY
from .core.schemas import Document, ImportResult, Section
from .importer import import_html
from .renderer import export_body_html, export_html

log = logging.getLogger(__name__)

router = APIRouter(prefix="/spark", tags=["Spark Blocks"])


class ImportRequest(BaseModel):
    html: str


class ExportRequest(BaseModel):
    sections: List[Section]
    title: str = "Agreement Form"
    lang: str = "en"
    body_only: bool = False
    include_metadata: bool = False


class ValidateRequest(BaseModel):
    sections: list


class ValidateResponse(BaseModel):
    valid: bool
    error: Optional[str] = None


@router.post("/import", response_model=ImportResult, response_model_by_alias=True)
def api_import(req: ImportRequest):
    """HTML quelconque → sections + warnings (jamais d'erreur pour du texte)."""
    return import_html(req.html)


@router.post("/export", response_class=HTMLResponse)
def api_export(req: ExportRequest):
    """
    Sections → HTML.
    body_only=false : document complet + commentaire spark-metadata.
    body_only=true  : markup des sections seul (include_metadata optionnel).
    """
    if req.body_only:
        return HTMLResponse(export_body_html(req.sections, include_metadata=req.include_metadata))
    return HTMLResponse(export_html(req.sections, title=req.title, lang=req.lang))


@router.post("/validate", response_model=ValidateResponse)
def api_validate(req: ValidateRequest):
    """Vérifie qu'une liste de sections respecte le modèle (colonnes, types de blocs)."""
    try:
        Document.model_validate({"sections": req.sections})
    except ValidationError as e:
        log.debug("Document invalide : %d erreurs", e.error_count())
        return ValidateResponse(valid=False, error=str(e))
    return ValidateResponse(valid=True)


@router.get("/catalog")
def api_catalog():
    """Types de blocs disponibles + schéma JSON de chacun."""
    return {
        "blocks": [
            {"type": kind, "schema": cls.model_json_schema(by_alias=True)}
            for kind, cls in BLOCK_REGISTRY.items()
        ]
    }
