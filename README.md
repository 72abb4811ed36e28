# rstfast

Small, dependency-free pieces for rendering reStructuredText to HTML:
inline markup, roles, line classification, option lists, list markers
and tables.

## Installation

```
pip install rstfast
```

## Inline markup

```python
from rstfast.inline import process_inline

process_inline("This has **bold**, *italic* and ``code``.")
# 'This has <strong>bold</strong>, <em>italic</em> and <code>code</code>.'

process_inline("Visit `Example <https://example.com>`_ today.")
# 'Visit <a href="https://example.com">Example</a> today.'
```

`process_inline` handles `***bold italic***`, `**bold**`, `*italic*`,
` ``literal`` `, `:role:`content``, external links written as
`` `text <url>`_ `` or `` `text <url>`__ ``, and backslash escapes
(`\*`, `\\`, `\<`, `\>` and the like). A backslash followed by a space
is dropped, which joins adjacent markup: `H\ :sub:`2`\ O` renders as
`H<sub>2</sub>O`. Substitution references such as `|name|` are passed
through unchanged. Other text is HTML-escaped.

## Roles

```python
from rstfast.roles import render_role

render_role("ref", "My Section <section-label>")
# '<a href="#section-label" class="reference internal">My Section</a>'

render_role("abbr", "RST (reStructuredText)")
# '<abbr title="reStructuredText">RST</abbr>'
```

Besides `ref` and `abbr`, `render_role` knows the common text roles
(`emphasis`, `strong`, `literal`, `code`, `sub`, `sup`, `kbd`, `file`,
`math` and others), `doc`, `term`, `pep`, `rfc`, and cross-reference
roles such as `class` and `func`. Unknown roles render as
`<span class="role-NAME">...</span>`.

## Text helpers

`rstfast.text.escape_html` escapes `&`, `<`, `>` and `"`.
`rstfast.text.slugify` lower-cases text and joins its alphanumeric runs
with hyphens, as used for `term` link anchors.

## Classifying lines

```python
from rstfast.parser import LineKind, classify_line

info = classify_line(".. code-block:: python")
info.kind    # LineKind.DIRECTIVE_START
info.values  # ('code-block', 'python')
```

`classify_line` returns a frozen `LineInfo` with a `kind` (a `LineKind`
such as `EMPTY`, `SECTION_ADORNMENT`, `BULLET_LIST_ITEM`,
`FIELD_LIST_ITEM`, `TARGET` or `DOCTEST_BLOCK`), the line's payload in
`values`, and `indent` for indented lines. `parse_directive_options`
reads the leading `:name: value` lines of a sequence and returns the
options as a dict together with the number of lines it consumed.

## Lists

`rstfast.lists` strips bullet and enumerated markers
(`strip_bullet_marker`, `strip_enumerated_marker`), recognises option
lists (`is_option_line`, `is_option_list`, `parse_option_line`) and
renders them as an HTML definition list with `convert_option_list`.

## Tables

```python
from rstfast.tables import convert_simple_table
from rstfast.grid import convert_grid_table

convert_simple_table("=====  =====\nA      B\n=====  =====")

convert_grid_table(
    "+------+------+\n"
    "| A    | B    |\n"
    "+======+======+\n"
    "| 1    | 2    |\n"
    "+------+------+"
)
```

`rstfast.tables` also renders CSV tables (`convert_csv_table`, with
`parse_csv_line` for splitting a line) and list tables
(`convert_list_table`), with optional caption, column widths and
alignment. `rstfast.grid` handles column spans and two-row spans, and
renders bullet lists and code blocks found inside grid cells.

## What it does not do

The package renders pieces, not documents. It has no function that
turns a whole reStructuredText document into HTML, so sections,
paragraphs, directives such as admonitions, and substitution
definitions are not assembled for you; `classify_line` tells you what a
line is, and the caller decides what to do with it. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```