"""Simple tables, CSV tables and list tables rendered as HTML."""

from __future__ import annotations

import math
import re

from rstfast.inline import process_inline
from rstfast.text import escape_html

_COLUMN_RUN = re.compile(r"=+")

_ALIGN_STYLES = {
    "center": ' style="margin-left: auto; margin-right: auto;"',
    "left": ' style="margin-right: auto;"',
    "right": ' style="margin-left: auto;"',
}


def _is_simple_border(line: str) -> bool:
    return bool(line) and "=" in line and set(line) <= {"=", " "}


def _is_dash_separator(line: str) -> bool:
    return bool(line) and "-" in line and set(line) <= {"-", "=", " "}


def _column_boundaries(border: str) -> list[tuple[int, int]]:
    return [match.span() for match in _COLUMN_RUN.finditer(border)]


def _extract_cells(line: str, boundaries: list[tuple[int, int]]) -> list[str]:
    length = len(line)
    return [
        line[start : min(end, length)].strip() if start < length else ""
        for start, end in boundaries
    ]


def _render_simple_cell(cell: str) -> str:
    if cell.startswith(("http://", "https://")):
        url = escape_html(cell.strip())
        return f'<a href="{url}">{url}</a>'
    return process_inline(cell)


def is_simple_table(text: str) -> bool:
    """Return True if the text is framed by ``=`` border lines, top and bottom."""
    lines = text.splitlines()
    if len(lines) < 3:
        return False
    return _is_simple_border(lines[0].strip()) and _is_simple_border(lines[-1].strip())


def convert_simple_table(text: str) -> str:
    """Render a simple table; a third border line marks the end of a header."""
    lines = text.splitlines()
    if len(lines) < 3:
        return f"<p>{escape_html(text)}</p>"

    boundaries = _column_boundaries(lines[0].strip())
    if not boundaries:
        return f"<p>{escape_html(text)}</p>"

    border_positions = [
        index for index, line in enumerate(lines) if _is_simple_border(line.strip())
    ]
    has_header = len(border_positions) >= 3
    in_header = has_header
    header_rows = 0

    parts = ['<table class="simple-table">\n']
    if has_header:
        parts.append("<thead>\n")

    for index, line in enumerate(lines):
        trimmed = line.strip()
        if _is_simple_border(trimmed):
            if has_header and index == border_positions[1] and header_rows > 0:
                parts.append("</thead>\n<tbody>\n")
                in_header = False
            continue
        if _is_dash_separator(trimmed):
            continue

        tag = "th" if in_header else "td"
        cells = "".join(
            f"<{tag}>{_render_simple_cell(cell)}</{tag}>"
            for cell in _extract_cells(line, boundaries)
        )
        parts.append(f"<tr>{cells}</tr>\n")
        if in_header:
            header_rows += 1

    if has_header:
        parts.append("</tbody>\n")
    parts.append("</table>")
    return "".join(parts)


def _parse_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def _format_percent(value: float, total: float) -> str:
    if total == 0:
        if value == 0 or math.isnan(value):
            return "NaN"
        return "inf" if value > 0 else "-inf"
    pct = value / total * 100.0
    if math.isnan(pct):
        return "NaN"
    if math.isinf(pct):
        return "inf" if pct > 0 else "-inf"
    return f"{pct:.1f}"


def _colgroup(pieces: list[str]) -> str:
    numbers = [n for n in (_parse_number(piece) for piece in pieces) if n is not None]
    total = sum(numbers)
    cols = "".join(
        f'<col style="width: {_format_percent(n, total)}%">\n' for n in numbers
    )
    return f"<colgroup>\n{cols}</colgroup>\n"


def _table_open(css_class: str, title: str, align: str | None) -> str:
    opening = f'<table class="{css_class}"{_ALIGN_STYLES.get(align or "", "")}>\n'
    if title:
        opening += f"<caption>{escape_html(title)}</caption>\n"
    return opening


def parse_csv_line(line: str) -> list[str]:
    """Split a line on commas outside double quotes; quotes are dropped."""
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
    cells.append("".join(current))
    return cells


def convert_csv_table(
    title: str,
    headers: str | None,
    widths: str | None,
    align: str | None,
    content: str,
) -> str:
    """Render a ``csv-table`` directive's content as HTML."""
    parts = [_table_open("csv-table", title, align)]

    if widths is not None:
        parts.append(_colgroup([piece.strip() for piece in widths.split(",")]))

    if headers is not None:
        cells = "".join(
            f"<th>{process_inline(cell.strip())}</th>" for cell in parse_csv_line(headers)
        )
        parts.append(f"<thead>\n<tr>{cells}</tr>\n</thead>\n")

    parts.append("<tbody>\n")
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue
        cells = "".join(
            f"<td>{process_inline(cell.strip())}</td>" for cell in parse_csv_line(trimmed)
        )
        parts.append(f"<tr>{cells}</tr>\n")
    parts.append("</tbody>\n</table>")
    return "".join(parts)


def _strip_repeated_prefix(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix) :]
    return text


def _parse_list_table_rows(content: str) -> list[list[str]]:
    rows: list[list[str]] = []
    row: list[str] = []
    cell = ""
    in_row = False

    for line in content.splitlines():
        trimmed = line.strip()
        if trimmed.startswith("* -"):
            if in_row:
                if cell:
                    row.append(cell)
                rows.append(row)
                row = []
            in_row = True
            cell = _strip_repeated_prefix(
                _strip_repeated_prefix(trimmed, "* -"), "* - "
            ).strip()
        elif in_row and trimmed.startswith("- "):
            if cell:
                row.append(cell)
            cell = trimmed[2:].strip()
        elif in_row and trimmed:
            cell = f"{cell} {trimmed}" if cell else trimmed

    if in_row:
        if cell:
            row.append(cell)
        rows.append(row)
    return rows


def convert_list_table(
    title: str,
    header_rows: int,
    stub_columns: int,
    widths: str | None,
    align: str | None,
    content: str,
) -> str:
    """Render a ``list-table`` directive's content as HTML."""
    parts = [_table_open("list-table", title, align)]

    if widths is not None:
        parts.append(_colgroup(widths.split()))

    rows = _parse_list_table_rows(content)
    for row_index, row in enumerate(rows):
        if header_rows > 0 and row_index == 0:
            parts.append("<thead>\n")
        if header_rows > 0 and row_index == header_rows:
            parts.append("</thead>\n<tbody>\n")

        is_header = row_index < header_rows
        cells = []
        for col_index, cell in enumerate(row):
            is_stub = col_index < stub_columns
            tag = "th" if is_header or is_stub else "td"
            css = ' class="stub"' if is_stub else ""
            cells.append(f"<{tag}{css}>{process_inline(cell.strip())}</{tag}>")
        parts.append(f"<tr>{''.join(cells)}</tr>\n")

    if header_rows > 0 and rows:
        parts.append("</tbody>\n")
    parts.append("</table>")
    return "".join(parts)