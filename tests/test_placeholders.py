"""Tests placeholders @Nom / PH@Nom."""
from spark_blocks.placeholders import (
    contains_placeholders,
    extract_placeholders,
    highlight_placeholders,
    replace_placeholder,
)


def test_contains_placeholders():
    assert contains_placeholders("Hello @Name")
    assert contains_placeholders("Hello PH@Name")
    assert not contains_placeholders("Hello Name")
    assert not contains_placeholders("")


def test_extract_unique_in_order():
    assert extract_placeholders("@A and PH@B and @A") == ["@A", "PH@B"]


def test_replace_whole_word_only():
    assert replace_placeholder("Hi @Name, @NameFull", "@Name", "Bob") == "Hi Bob, @NameFull"


def test_replace_value_is_literal():
    assert replace_placeholder("Hi @Name", "@Name", r"\1 & co") == r"Hi \1 & co"


def test_highlight_escapes_then_wraps():
    assert highlight_placeholders("<b>@X</b>") == '&lt;b&gt;<span class="placeholder">@X</span>&lt;/b&gt;'
