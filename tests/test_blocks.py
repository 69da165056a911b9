"""Tests blocs — défauts par type, alias camelCase, union discriminée, invariant colonnes."""
import pytest
from pydantic import ValidationError

from spark_blocks.blocks import (
    BLOCK_REGISTRY,
    DividerBlock,
    HeadingBlock,
    ParagraphBlock,
    TextInputBlock,
    field_attr,
)
from spark_blocks.core.schemas import Section, make_section


# ── Défauts ──────────────────────────────────────────────────────────────────

def test_heading_defaults_depend_on_level():
    h1 = HeadingBlock(level=1, text="T")
    h3 = HeadingBlock(level=3, text="T")
    assert (h1.font_size, h1.font_weight) == (32, 700)
    assert (h3.font_size, h3.font_weight) == (20, 600)
    assert h1.color == "#0f172a"
    assert h1.margin_bottom == 12


def test_heading_explicit_size_kept():
    assert HeadingBlock(level=1, font_size=40).font_size == 40


def test_paragraph_defaults():
    p = ParagraphBlock(text="x")
    assert p.line_height == 1.6
    assert p.font_size == 14
    assert p.margin_bottom == 8


def test_divider_defaults():
    d = DividerBlock()
    assert (d.thickness, d.style, d.color) == (1, "solid", "#e2e8f0")
    assert (d.margin_top, d.margin_bottom) == (16, 16)


def test_ids_are_unique():
    assert ParagraphBlock().id != ParagraphBlock().id


def test_generated_field_name():
    name = TextInputBlock().field_name
    assert name.startswith("text_")
    assert len(name) == len("text_") + 8


def test_width_bounds():
    with pytest.raises(ValidationError):
        ParagraphBlock(width=0)
    with pytest.raises(ValidationError):
        ParagraphBlock(width=101)


# ── Alias JSON ───────────────────────────────────────────────────────────────

def test_dump_uses_camel_case_aliases():
    data = HeadingBlock(level=2, text="T").model_dump(by_alias=True)
    assert data["fontSize"] == 24
    assert data["marginBottom"] == 12
    assert "font_size" not in data


def test_accepts_alias_and_field_names():
    assert ParagraphBlock.model_validate({"text": "x", "fontSize": 18}).font_size == 18
    assert ParagraphBlock.model_validate({"text": "x", "font_size": 18}).font_size == 18


def test_registry_matches_type_discriminator():
    assert len(BLOCK_REGISTRY) == 14
    for kind, cls in BLOCK_REGISTRY.items():
        assert cls().type == kind


def test_field_attr():
    assert field_attr("font_size") == "data-font-size"
    assert field_attr("text") == "data-text"


# ── Sections ─────────────────────────────────────────────────────────────────

def test_section_rejects_column_mismatch():
    with pytest.raises(ValidationError):
        Section(columns=2, blocks=[[]])


def test_section_rejects_too_many_columns():
    with pytest.raises(ValidationError):
        Section(columns=4, blocks=[[], [], [], []])


def test_make_section_caps_columns():
    s = make_section([[], [], [], []])
    assert s.columns == 3
    assert len(s.blocks) == 3


def test_make_section_empty_is_one_column():
    s = make_section([])
    assert s.columns == 1
    assert s.blocks == [[]]


def test_section_discriminated_union_from_json():
    s = Section.model_validate({
        "columns": 1,
        "blocks": [[{"type": "divider", "thickness": 2}, {"type": "paragraph", "text": "x"}]],
    })
    assert isinstance(s.blocks[0][0], DividerBlock)
    assert isinstance(s.blocks[0][1], ParagraphBlock)
    assert [b.type for b in s.iter_blocks()] == ["divider", "paragraph"]


def test_section_unknown_block_type_rejected():
    with pytest.raises(ValidationError):
        Section.model_validate({"columns": 1, "blocks": [[{"type": "signature"}]]})
