"""Tests sanitizer par défaut."""
from bs4 import BeautifulSoup

from spark_blocks.importer.sanitizer import has_dangerous_content, sanitize_html


def test_script_removed_with_content():
    assert sanitize_html("<p>a</p><script>alert(1)</script>") == "<p>a</p>"


def test_embedded_objects_removed():
    html = sanitize_html('<p>a</p><iframe src="x"></iframe><object><embed src="y"></object><noscript>n</noscript>')
    assert html == "<p>a</p>"


def test_event_handlers_removed():
    assert sanitize_html('<p onclick="steal()">a</p>') == "<p>a</p>"


def test_attribute_allowlist():
    p = BeautifulSoup(sanitize_html('<p foo="1" data-x="2" aria-label="l" style="color:red" '
                                    'colspan="2">a</p>'), "html.parser").p
    assert "foo" not in p.attrs
    assert p["data-x"] == "2"
    assert p["aria-label"] == "l"
    assert p["style"] == "color:red"
    assert p["colspan"] == "2"


def test_script_urls_removed():
    a = BeautifulSoup(sanitize_html('<a href=" JaVa\tscript:alert(1)">x</a>'), "html.parser").a
    assert "href" not in a.attrs
    img = BeautifulSoup(sanitize_html('<img src="javascript:x()">'), "html.parser").img
    assert "src" not in img.attrs


def test_regular_urls_kept():
    a = BeautifulSoup(sanitize_html('<a href="https://example.com" target="_blank">x</a>'), "html.parser").a
    assert a["href"] == "https://example.com"
    assert a["target"] == "_blank"


def test_has_dangerous_content():
    assert has_dangerous_content("<script>x</script>")
    assert has_dangerous_content('<img src="a" onerror="x()">')
    assert has_dangerous_content('<a href="javascript:void(0)">x</a>')
    assert not has_dangerous_content("<p>Plain <b>text</b></p>")
    assert not has_dangerous_content(None)
