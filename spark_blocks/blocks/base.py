"""
Bloc de base — attributs communs à toutes les variantes.
Identité (id, type) + layout/style (largeur, marges, padding, fond, bordure).
"""
import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


def new_field_name(kind: str) -> str:
    """Nom de champ de formulaire généré (unique) quand la source n'en fournit pas."""
    return f"{kind}_{uuid.uuid4().hex[:8]}"


class SparkModel(BaseModel):
    """snake_case côté Python, camelCase côté JSON (format de l'éditeur)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseBlock(SparkModel):
    """Bloc de base (classe parente de toutes les variantes)."""
    id: str = Field(default_factory=new_id)
    type: str
    width: int = Field(default=100, ge=1, le=100)
    margin_top: int = 0
    margin_bottom: int = 8
    margin_left: int = 0
    margin_right: int = 0
    padding_x: int = 0
    padding_y: int = 0
    background_color: str = ""
    border_width: int = 0
    border_color: str = ""
    border_radius: int = 0
    locked: bool = False


# Champs relevant du Style Extractor (ensemble borné)
STYLE_FIELDS = (
    "width",
    "margin_top", "margin_bottom", "margin_left", "margin_right",
    "padding_x", "padding_y",
    "background_color",
    "border_width", "border_color", "border_radius",
)


def field_attr(name: str) -> str:
    """Attribut data-* portant un champ structuré ('font_size' → 'data-font-size')."""
    return "data-" + name.replace("_", "-")
