"""
Schémas Pydantic du modèle de document.
Structure : Document → Section → colonnes → Block

Section.blocks[i] = liste ordonnée des blocs de la colonne i ;
len(blocks) == columns est garanti par le validateur.
"""
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from ..blocks import BlockUnion, SparkModel, new_id
from .config import MAX_COLUMNS

LayoutKind = Literal["metadata", "section", "table-email", "generic", "empty"]


class Section(SparkModel):
    """Section horizontale de 1 à 3 colonnes."""
    id: str = Field(default_factory=new_id)
    columns: int = Field(default=1, ge=1, le=MAX_COLUMNS)
    blocks: List[List[BlockUnion]] = Field(default_factory=lambda: [[]])

    @model_validator(mode="after")
    def _check_columns(self):
        if len(self.blocks) != self.columns:
            raise ValueError(
                f"Section {self.id} : {len(self.blocks)} colonnes de blocs pour columns={self.columns}"
            )
        return self

    def iter_blocks(self):
        for column in self.blocks:
            yield from column


def make_section(column_blocks: List[list], section_id: Optional[str] = None) -> Section:
    """Construit une Section depuis une liste de colonnes (bornée à MAX_COLUMNS)."""
    columns = column_blocks[:MAX_COLUMNS] or [[]]
    kwargs = {"id": section_id} if section_id else {}
    return Section(columns=len(columns), blocks=[list(c) for c in columns], **kwargs)


class Document(SparkModel):
    """Document complet : sections dans l'ordre visuel."""
    sections: List[Section] = Field(default_factory=list)


class SparkMetadata(SparkModel):
    """Charge utile du commentaire <!-- spark-metadata: {...} -->."""
    version: str
    sections: List[Section]


class DocumentFeatures(SparkModel):
    """Indicateurs relevés sur le HTML importé."""
    has_styles: bool = False
    has_tables: bool = False
    has_lists: bool = False
    has_forms: bool = False
    style_content: str = ""


class ImportResult(SparkModel):
    """Résultat d'un import : sections + warnings cumulés (jamais bloquants)."""
    sections: List[Section] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    layout: LayoutKind = "empty"
    is_editor_generated: bool = False
    version: Optional[str] = None
    features: DocumentFeatures = Field(default_factory=DocumentFeatures)

    @property
    def document(self) -> Document:
        return Document(sections=self.sections)
