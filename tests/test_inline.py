import pytest

from rstfast.inline import process_inline


def test_bold():
    assert "<strong>bold</strong>" in process_inline("This has **bold** text.")


def test_bold_exact():
    assert process_inline("This has **bold** text.") == "This has <strong>bold</strong> text."


def test_italic():
    assert "<em>italic</em>" in process_inline("This has *italic* text.")


def test_inline_code():
    html = process_inline("This has ``inline code`` in it.")
    assert "<code>inline code</code>" in html


def test_inline_code_is_escaped():
    assert process_inline("``a<b & c``") == "<code>a&lt;b &amp; c</code>"


def test_bold_italic():
    html = process_inline("This has ***bold italic*** text.")
    assert (
        "<strong><em>bold italic</em></strong>" in html
        or "<em><strong>bold italic</strong></em>" in html
    )


def test_bold_italic_exact():
    assert process_inline("***x***") == "<strong><em>x</em></strong>"


def test_nested_italic_in_bold():
    assert process_inline("**a *b* c**") == "<strong>a <em>b</em> c</strong>"


def test_role():
    html = process_inline("See :ref:`my-label` for details.")
    assert "<a" in html
    assert 'href="#my-label"' in html


def test_emphasis_role_exact():
    assert process_inline(":emphasis:`x`") == "<em>x</em>"


def test_unterminated_role_is_plain():
    assert process_inline(":ref:`abc") == ":ref:`abc"


def test_escaped_asterisk():
    html = process_inline("\\*not italic\\*")
    assert "*not italic*" in html
    assert "<em>" not in html


def test_backslash_space_removal():
    html = process_inline("H\\ :subscript:`2`\\ O is water.")
    assert "H<sub>2</sub>O" in html


def test_double_backslash():
    html = process_inline("Use \\\\ for a literal backslash.")
    assert "Use \\ for" in html


def test_mixed_escapes_and_markup():
    html = process_inline("This is *italic* but \\*this\\* is not.")
    assert "<em>italic</em>" in html
    assert "*this*" in html


def test_external_link():
    html = process_inline("Visit `Example <https://example.com>`_ for more.")
    assert "<a" in html
    assert "https://example.com" in html


def test_external_link_exact():
    html = process_inline("Visit `Example <https://example.com>`_ for more.")
    assert html == 'Visit <a href="https://example.com">Example</a> for more.'


def test_anonymous_external_link():
    html = process_inline("`Ex <https://example.com/x>`__ end")
    assert html == '<a href="https://example.com/x">Ex</a> end'


def test_link_without_url_stays_plain():
    assert process_inline("`plain`_") == "`plain`_"


def test_html_escaping():
    html = process_inline("Use <script> and & characters safely.")
    assert "&lt;script&gt;" in html
    assert "&amp;" in html


def test_escaped_angle_brackets():
    html = process_inline("Angle brackets: \\< \\>")
    assert "&lt; &gt;" in html
    assert "&amp;lt;" not in html


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("2*3*4", "2*3*4"),
        ("abc\\", "abc\\"),
        ("\\q", "\\q"),
        ("\\_under\\_", "_under_"),
        ("a | b", "a | b"),
        ("||", "||"),
        ("|name| here", "|name| here"),
        ("", ""),
    ],
)
def test_plain_and_edge_cases(source, expected):
    assert process_inline(source) == expected


def test_star_after_word_is_not_markup():
    assert process_inline("a*b*") == "a*b*"