"""Tests Element-to-Block Mapper — dispatch par tag + fallback raw-html."""
from bs4 import BeautifulSoup

from spark_blocks.blocks import (
    ButtonBlock,
    DatePickerBlock,
    DividerBlock,
    DropdownBlock,
    HeadingBlock,
    HyperlinkBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    RawHTMLBlock,
    SingleCheckboxBlock,
    TableBlock,
    TextareaBlock,
    TextInputBlock,
)
from spark_blocks.importer.mapper import SUPPORTED_TAGS, MapContext, cell_text, map_element


def _map(html: str, ctx: MapContext = None):
    ctx = ctx or MapContext()
    el = BeautifulSoup(html, "html.parser").find(True)
    return map_element(el, ctx), ctx.warnings


# ── Titres / texte ───────────────────────────────────────────────────────────

def test_heading_from_tag_and_style():
    block, warnings = _map('<h2 style="color: #ff0000">Title</h2>')
    assert isinstance(block, HeadingBlock)
    assert (block.level, block.text, block.color) == (2, "Title", "#ff0000")
    assert block.font_size == 24
    assert warnings == []


def test_heading_inline_style_overrides_defaults():
    block, _ = _map('<h1 style="font-size: 40px; text-align: center; font-weight: bold">T</h1>')
    assert (block.font_size, block.text_align, block.font_weight) == (40, "center", 700)


def test_heading_keeps_inline_markup():
    block, _ = _map("<h3>Hello <b>World</b></h3>")
    assert block.text == "Hello World"
    assert block.html == "Hello <b>World</b>"


def test_heading_with_block_content_is_raw():
    block, warnings = _map("<h1>Hello<p>World</p></h1>")
    assert isinstance(block, RawHTMLBlock)
    assert "World" in block.html
    assert len(warnings) == 1


def test_paragraph():
    block, _ = _map('<p style="margin-top: 20px; background-color: #eee">Some text</p>')
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Some text"
    assert block.html is None
    assert block.line_height == 1.6
    assert (block.margin_top, block.background_color) == (20, "#eee")


def test_inline_tag_becomes_paragraph():
    block, _ = _map("<strong>Important</strong>")
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Important"


def test_ignored_tags():
    for html in ("<script>x()</script>", "<style>p {}</style>", '<meta charset="utf-8">', "<br>"):
        block, warnings = _map(html)
        assert block is None
        assert warnings == []


# ── Conteneurs ───────────────────────────────────────────────────────────────

def test_wrapper_chain_collapses():
    block, warnings = _map("<div><div><span><p>Deep</p></span></div></div>")
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Deep"
    assert warnings == []


def test_container_with_text_only():
    block, _ = _map("<div>Just text</div>")
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Just text"


def test_empty_container():
    block, warnings = _map("<div>   </div>")
    assert block is None
    assert warnings == []


def test_container_inline_child_and_text():
    block, _ = _map("<div>Hello <b>there</b></div>")
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Hello there"
    assert block.html == "Hello <b>there</b>"


def test_ambiguous_container_is_raw():
    block, warnings = _map("<div><h2>A</h2><p>B</p></div>")
    assert isinstance(block, RawHTMLBlock)
    assert block.html == "<div><h2>A</h2><p>B</p></div>"
    assert "Ambiguous" in warnings[0]


def test_unwrap_depth_bound():
    block, warnings = _map("<div><div><p>x</p></div></div>", MapContext(max_depth=1))
    assert isinstance(block, RawHTMLBlock)
    assert block.html == "<div><p>x</p></div>"
    assert "Nesting" in warnings[0]


def test_unknown_tag_is_raw_with_warning():
    block, warnings = _map("<blockquote>Quote</blockquote>")
    assert isinstance(block, RawHTMLBlock)
    assert block.html == "<blockquote>Quote</blockquote>"
    assert "<blockquote>" in warnings[0]


def test_warnings_accumulate_in_context():
    ctx = MapContext()
    _map("<blockquote>a</blockquote>", ctx)
    _map("<aside>b</aside>", ctx)
    assert len(ctx.warnings) == 2


# ── Formulaire ───────────────────────────────────────────────────────────────

def test_radio_contributes_nothing():
    block, warnings = _map('<input type="radio" name="r" value="1">')
    assert block is None
    assert warnings == []


def test_checkbox_input():
    block, _ = _map('<input type="checkbox" name="agree" checked required>')
    assert isinstance(block, SingleCheckboxBlock)
    assert (block.field_name, block.checked, block.required) == ("agree", True, True)


def test_text_inputs_validation_type():
    block, _ = _map('<input type="email" name="mail" placeholder="you@example.com" required>')
    assert isinstance(block, TextInputBlock)
    assert (block.validation_type, block.field_name, block.required) == ("email", "mail", True)
    assert block.placeholder == "you@example.com"
    assert _map('<input type="tel">')[0].validation_type == "phone"
    assert _map("<input>")[0].validation_type == "none"


def test_input_maxlength():
    assert _map('<input type="text" maxlength="20">')[0].max_length == "20"


def test_date_input():
    block, _ = _map('<input type="date" name="dob">')
    assert isinstance(block, DatePickerBlock)
    assert block.field_name == "dob"


def test_submit_input_is_button():
    block, _ = _map('<input type="submit" value="Send">')
    assert isinstance(block, ButtonBlock)
    assert (block.label, block.button_type) == ("Send", "submit")


def test_unsupported_input_is_raw():
    block, warnings = _map('<input type="file" name="doc">')
    assert isinstance(block, RawHTMLBlock)
    assert 'type="file"' in warnings[0]


def test_label_with_checkbox():
    block, _ = _map('<label><input type="checkbox" name="agree" required> I agree</label>')
    assert isinstance(block, SingleCheckboxBlock)
    assert (block.label, block.field_name, block.required) == ("I agree", "agree", True)


def test_label_with_radio():
    assert _map('<label><input type="radio" name="r"> Yes</label>')[0] is None


def test_plain_label_is_paragraph():
    block, _ = _map("<label>Name</label>")
    assert isinstance(block, ParagraphBlock)
    assert block.text == "Name"


def test_select():
    block, _ = _map('<select name="country"><option value="">Choose</option>'
                    '<option value="fr">France</option><option value="de" selected>Germany</option></select>')
    assert isinstance(block, DropdownBlock)
    assert block.options == ["France", "Germany"]
    assert block.default_value == "Germany"
    assert block.field_name == "country"


def test_textarea():
    block, _ = _map('<textarea name="msg" rows="6">Hello</textarea>')
    assert isinstance(block, TextareaBlock)
    assert (block.rows, block.default_value, block.field_name) == (6, "Hello", "msg")


def test_invalid_field_value_falls_back_to_raw():
    block, warnings = _map('<textarea rows="0">x</textarea>')
    assert isinstance(block, RawHTMLBlock)
    assert len(warnings) == 1


def test_button_element():
    block, _ = _map('<button type="submit" class="btn-secondary">Go</button>')
    assert isinstance(block, ButtonBlock)
    assert (block.label, block.button_type, block.variant) == ("Go", "submit", "secondary")


# ── Médias / listes / liens ──────────────────────────────────────────────────

def test_image():
    block, _ = _map('<img src="logo.png" alt="Logo" align="right" style="max-height: 120px">')
    assert isinstance(block, ImageBlock)
    assert (block.src, block.alt, block.alignment, block.max_height) == ("logo.png", "Logo", "right", 120)


def test_divider_border_top():
    block, _ = _map('<hr style="border: none; border-top: 2px dashed #ff0000">')
    assert isinstance(block, DividerBlock)
    assert (block.thickness, block.style, block.color) == (2, "dashed", "#ff0000")


def test_plain_divider_defaults():
    block, _ = _map("<hr>")
    assert (block.thickness, block.style, block.color) == (1, "solid", "#e2e8f0")


def test_lists():
    block, _ = _map("<ul><li>One</li><li>Two <b>bold</b></li></ul>")
    assert isinstance(block, ListBlock)
    assert block.items == ["One", "Two bold"]
    assert block.list_type == "unordered"
    assert _map("<ol><li>a</li></ol>")[0].list_type == "ordered"


def test_list_with_stray_content_is_raw():
    block, warnings = _map("<ul>Note<li>a</li></ul>")
    assert isinstance(block, RawHTMLBlock)
    assert "Note" in block.html
    assert any("outside list items" in w for w in warnings)
    block, _ = _map("<ol><li>a</li><p>b</p></ol>")
    assert isinstance(block, RawHTMLBlock)


def test_link():
    block, _ = _map('<a href="https://example.com" target="_blank">Go</a>')
    assert isinstance(block, HyperlinkBlock)
    assert (block.text, block.url, block.open_in_new_tab) == ("Go", "https://example.com", True)


def test_link_wrapping_image():
    block, _ = _map('<a href="/"><img src="a.png"></a>')
    assert isinstance(block, ImageBlock)


# ── Tables ───────────────────────────────────────────────────────────────────

def test_data_table_with_thead():
    block, warnings = _map("<table><thead><tr><th>A</th><th>B</th></tr></thead>"
                           "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>")
    assert isinstance(block, TableBlock)
    assert block.headers == ["A", "B"]
    assert block.rows == [["1", "2"]]
    assert block.header_row is True
    assert block.column_widths is None
    assert warnings == []


def test_first_row_is_header_without_marker():
    block, _ = _map("<table><tr><td>x</td><td>y</td></tr><tr><td>1</td><td>2</td></tr></table>")
    assert block.headers == ["x", "y"]
    assert block.rows == [["1", "2"]]
    assert block.header_row is False


def test_colspan_expanded():
    block, _ = _map('<table><tr><th colspan="2">Head</th></tr><tr><td>a</td><td>b</td></tr></table>')
    assert block.headers == ["Head", ""]
    assert block.rows == [["a", "b"]]


def test_rowspan_expanded():
    block, _ = _map('<table><tr><td rowspan="2">A</td><td>B</td></tr><tr><td>C</td></tr></table>')
    assert block.headers == ["A", "B"]
    assert block.rows == [["", "C"]]


def test_huge_spans_clamped():
    block, _ = _map('<table><tr><td colspan="99999999">A</td></tr><tr><td>1</td></tr></table>')
    assert len(block.headers) == 1000
    assert block.rows == [["1"] + [""] * 999]


def test_percent_column_widths():
    block, _ = _map('<table><tr><td width="30%">a</td><td width="70%">b</td></tr>'
                    "<tr><td>1</td><td>2</td></tr></table>")
    assert block.column_widths == [30.0, 70.0]


def test_layout_table_is_raw():
    block, warnings = _map('<table role="presentation"><tr><td>x</td></tr></table>')
    assert isinstance(block, RawHTMLBlock)
    assert "Layout table" in warnings[0]


def test_cell_text_line_breaks():
    cell = BeautifulSoup("<td>a<br>b<ul><li>one</li></ul></td>", "html.parser").td
    assert cell_text(cell) == "a\nb\n• one"


def test_supported_tags_cover_block_variants():
    for tag in ("h1", "p", "a", "hr", "img", "input", "textarea", "select", "button", "ul", "ol", "table"):
        assert tag in SUPPORTED_TAGS
    assert "video" not in SUPPORTED_TAGS
