"""
Restauration typée d'un bloc depuis les attributs data-* posés par le serializer.

<div data-block-type="heading" data-block-id="…" data-level="2" data-text="…">
→ HeadingBlock(level=2, text=…)

Listes encodées en JSON, booléens en "true"/"false" (coercition pydantic).
"""
import json
import logging
import typing
from typing import Optional

from bs4 import Tag
from pydantic import ValidationError

from ..blocks import BLOCK_REGISTRY, BaseBlock, RawHTMLBlock, field_attr
from ..core.config import EDITOR_BLOCK_ID_ATTR, EDITOR_BLOCK_TYPE_ATTR

log = logging.getLogger(__name__)


def _is_list_annotation(annotation) -> bool:
    if typing.get_origin(annotation) is list:
        return True
    return any(_is_list_annotation(arg) for arg in typing.get_args(annotation))


def block_fields_from_attrs(el: Tag, cls) -> dict:
    values = {}
    for name, info in cls.model_fields.items():
        if name in ("id", "type"):
            continue
        raw = el.get(field_attr(name))
        if raw is None:
            continue
        values[name] = json.loads(raw) if _is_list_annotation(info.annotation) else raw
    return values


def restore_block(el: Tag, warnings: list) -> Optional[BaseBlock]:
    """
    Bloc typé depuis `data-block-type` + data-*.
    None si l'élément n'est pas marqué ou si les attributs sont incohérents
    (warning ajouté — l'appelant repasse alors par le mapper).
    """
    kind = el.get(EDITOR_BLOCK_TYPE_ATTR)
    cls = BLOCK_REGISTRY.get(kind)
    if cls is None:
        if kind is not None:
            warnings.append(f'Unknown block type "{kind}"; element mapped heuristically')
        return None

    try:
        if cls is RawHTMLBlock:
            values = {"html": el.decode_contents()}
        else:
            values = block_fields_from_attrs(el, cls)
        if el.get(EDITOR_BLOCK_ID_ATTR):
            values["id"] = el[EDITOR_BLOCK_ID_ATTR]
        return cls.model_validate(values)
    except (ValueError, ValidationError) as e:
        log.debug("Restauration %s impossible : %s", kind, e)
        warnings.append(f'Could not restore "{kind}" block from its attributes; element mapped heuristically')
        return None
