"""Tests ligne de commande python -m spark_blocks."""
import json

from spark_blocks import Document, make_section
from spark_blocks.__main__ import main
from spark_blocks.blocks import ParagraphBlock


def test_import_command(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<h1>Hi</h1><p>World</p>", encoding="utf-8")
    assert main(["import", str(page)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["layout"] == "generic"
    assert len(data["sections"][0]["blocks"][0]) == 2


def test_export_command(tmp_path, capsys):
    doc = Document(sections=[make_section([[ParagraphBlock(text="Exported")]])])
    path = tmp_path / "doc.json"
    path.write_text(doc.model_dump_json(by_alias=True), encoding="utf-8")
    assert main(["export", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!DOCTYPE html>")
    assert "Exported" in out


def test_usage(capsys):
    assert main([]) == 2
    assert main(["frobnicate", "x"]) == 2
    assert "usage" in capsys.readouterr().err
