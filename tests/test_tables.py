import pytest

from rstfast.tables import (
    convert_csv_table,
    convert_list_table,
    convert_simple_table,
    is_simple_table,
    parse_csv_line,
)

BASIC = "=====  =====\nA      B\n=====  ====="
WITH_HEADER = (
    "=====  =====\nCol1   Col2\n=====  =====\nA      B\nC      D\n=====  ====="
)


def test_is_simple_table():
    assert is_simple_table(BASIC)


def test_is_simple_table_too_few_lines():
    assert not is_simple_table("=====  =====\nA      B")


def test_is_simple_table_no_borders():
    assert not is_simple_table("A      B\nC      D\nE      F")


def test_is_simple_table_empty():
    assert not is_simple_table("")


def test_convert_simple_table_basic():
    html = convert_simple_table(BASIC)
    assert "<table" in html
    assert "simple-table" in html
    assert ">A<" in html
    assert ">B<" in html


def test_convert_simple_table_basic_exact():
    assert convert_simple_table(BASIC) == (
        '<table class="simple-table">\n<tr><td>A</td><td>B</td></tr>\n</table>'
    )


def test_convert_simple_table_with_header():
    html = convert_simple_table(WITH_HEADER)
    assert "<thead>" in html
    assert "<th>" in html
    assert "<tbody>" in html
    assert "<td>" in html


def test_convert_simple_table_with_header_exact():
    assert convert_simple_table(WITH_HEADER) == (
        '<table class="simple-table">\n'
        "<thead>\n<tr><th>Col1</th><th>Col2</th></tr>\n</thead>\n<tbody>\n"
        "<tr><td>A</td><td>B</td></tr>\n"
        "<tr><td>C</td><td>D</td></tr>\n"
        "</tbody>\n</table>"
    )


def test_convert_simple_table_too_short_falls_back_to_paragraph():
    assert convert_simple_table("a & b\nc") == "<p>a &amp; b\nc</p>"


def test_convert_simple_table_skips_dash_separator():
    table = "=====  =====\nA      B\n-----  -----\nC      D\n=====  ====="
    html = convert_simple_table(table)
    assert html.count("<tr>") == 2
    assert "-----" not in html


def test_convert_simple_table_links_url_cells():
    table = (
        "=====================  =====\n"
        "https://example.com    x\n"
        "=====================  ====="
    )
    html = convert_simple_table(table)
    assert '<td><a href="https://example.com">https://example.com</a></td>' in html


def test_convert_simple_table_inline_markup_and_escapes():
    table = "========  ========\n**A**     \\*x\\*\n========  ========"
    html = convert_simple_table(table)
    assert "<td><strong>A</strong></td>" in html
    assert "<td>*x*</td>" in html


def test_parse_csv_line():
    cells = parse_csv_line('"Alice", 28, "New York"')
    assert len(cells) == 3
    assert cells[0].strip() == "Alice"
    assert cells[1].strip() == "28"
    assert cells[2].strip() == "New York"


def test_parse_csv_line_keeps_quoted_commas():
    assert parse_csv_line('"a, b",c') == ["a, b", "c"]


def test_convert_csv_table_full():
    html = convert_csv_table(
        "People", '"Name", "Age"', "1,3", "center", '"Alice", 28\n\n"Bob", 35'
    )
    assert html == (
        '<table class="csv-table" style="margin-left: auto; margin-right: auto;">\n'
        "<caption>People</caption>\n"
        "<colgroup>\n"
        '<col style="width: 25.0%">\n'
        '<col style="width: 75.0%">\n'
        "</colgroup>\n"
        "<thead>\n<tr><th>Name</th><th>Age</th></tr>\n</thead>\n"
        "<tbody>\n"
        "<tr><td>Alice</td><td>28</td></tr>\n"
        "<tr><td>Bob</td><td>35</td></tr>\n"
        "</tbody>\n</table>"
    )


def test_convert_csv_table_minimal():
    assert convert_csv_table("", None, None, None, "a,b") == (
        '<table class="csv-table">\n<tbody>\n<tr><td>a</td><td>b</td></tr>\n'
        "</tbody>\n</table>"
    )


@pytest.mark.parametrize(
    ("align", "style"),
    [
        ("left", ' style="margin-right: auto;"'),
        ("right", ' style="margin-left: auto;"'),
        ("middle", ""),
    ],
)
def test_convert_csv_table_alignment(align, style):
    html = convert_csv_table("", None, None, align, "x")
    assert html.startswith(f'<table class="csv-table"{style}>\n')


def test_convert_list_table_with_header():
    content = "* - Name\n  - Age\n* - Alice\n  - 28"
    assert convert_list_table("", 1, 0, None, None, content) == (
        '<table class="list-table">\n'
        "<thead>\n<tr><th>Name</th><th>Age</th></tr>\n</thead>\n<tbody>\n"
        "<tr><td>Alice</td><td>28</td></tr>\n"
        "</tbody>\n</table>"
    )


def test_convert_list_table_stub_column():
    content = "* - Alice\n  - 28"
    html = convert_list_table("", 0, 1, None, None, content)
    assert '<tr><th class="stub">Alice</th><td>28</td></tr>' in html
    assert "<thead>" not in html


def test_convert_list_table_widths_title_and_align():
    html = convert_list_table("Data", 0, 0, "1 1", "right", "* - a\n  - b")
    assert html.startswith(
        '<table class="list-table" style="margin-left: auto;">\n'
        "<caption>Data</caption>\n"
        "<colgroup>\n"
        '<col style="width: 50.0%">\n'
        '<col style="width: 50.0%">\n'
        "</colgroup>\n"
    )


def test_convert_list_table_continuation_lines():
    content = "* - Long\n    text\n  - B"
    html = convert_list_table("", 0, 0, None, None, content)
    assert "<tr><td>Long text</td><td>B</td></tr>" in html


def test_convert_list_table_inline_markup():
    html = convert_list_table("", 0, 0, None, None, "* - **bold**\n  - ``code``")
    assert "<td><strong>bold</strong></td><td><code>code</code></td>" in html