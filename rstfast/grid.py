"""Grid tables rendered as HTML, with column and row spans."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

from rstfast.inline import process_inline
from rstfast.text import escape_html

_BORDER_CHARS = frozenset("+-= ")


@dataclass
class _Cell:
    content: str
    colspan: int = 1
    rowspan: int = 1
    skip: bool = False


def _char_at(line: str, pos: int) -> str:
    return line[pos] if pos < len(line) else ""


def _is_grid_border(line: str) -> bool:
    return (
        bool(line)
        and line.startswith("+")
        and line.endswith("+")
        and set(line) <= _BORDER_CHARS
    )


def _column_positions(border: str) -> list[int]:
    return [pos for pos, char in enumerate(border) if char == "+"]


def _column_span(border: str, positions: list[int], col: int, num_cols: int) -> int:
    """Count the columns a cell covers, judged by the ``+`` marks in its top border."""
    next_pos = positions[col + 1]
    if next_pos >= len(border) or border[next_pos] == "+":
        return 1
    for check_col in range(col + 1, num_cols):
        if _char_at(border, positions[check_col + 1]) == "+":
            span = check_col - col + 1
            if span > 1:
                return span
            break
    return num_cols - col


def _cell_text(content_lines: list[str], start: int, end: int) -> str:
    pieces = []
    for line in content_lines:
        s, e = min(start, len(line)), min(end, len(line))
        if s < e:
            pieces.append(line[s:e].rstrip("|").strip())
    return "\n".join(pieces).strip()


def _row_spans(next_border: str, left: int, cell_start: int) -> int:
    if _char_at(next_border, left) == "+":
        if _char_at(next_border, cell_start) not in ("-", "="):
            return 2
    return 1


def _detect_rows(lines: list[str], positions: list[int]) -> list[list[_Cell]]:
    if len(positions) <= 1:
        return []
    num_cols = len(positions) - 1
    borders = [index for index, line in enumerate(lines) if _is_grid_border(line.strip())]
    if len(borders) < 2:
        return []

    rows: list[list[_Cell]] = []
    for start, end in zip(borders, borders[1:]):
        content_lines = [
            line for line in lines[start + 1 : end] if line.strip().startswith("|")
        ]
        if not content_lines:
            continue
        border = lines[start]
        next_border = lines[end]
        cells: list[_Cell] = []
        col = 0
        while col < num_cols:
            span = _column_span(border, positions, col, num_cols)
            cell_start = positions[col] + 1
            cell_end = positions[col + span]
            cells.append(
                _Cell(
                    content=_cell_text(content_lines, cell_start, cell_end),
                    colspan=span,
                    rowspan=_row_spans(next_border, positions[col], cell_start),
                )
            )
            col += span
        rows.append(cells)

    for row_index, row in enumerate(rows):
        for cell_index, cell in enumerate(row):
            for offset in range(1, cell.rowspan):
                target = row_index + offset
                if target < len(rows) and cell_index < len(rows[target]):
                    rows[target][cell_index].skip = True
    return rows


def _render_code_block(content: str) -> str:
    lines = content.splitlines()
    first = lines[0].strip()
    colons = first.rfind("::")
    lang = first[colons + 2 :].strip() if colons != -1 else ""

    body = lines[1:]
    while body and not body[0].strip():
        body.pop(0)
    code = textwrap.dedent("\n".join(body))
    lang_class = f' class="language-{escape_html(lang)}"' if lang else ""
    return f"<pre><code{lang_class}>{escape_html(code)}</code></pre>"


def _render_list(content: str) -> str:
    items = "".join(
        f"<li>{process_inline(line.strip()[2:])}</li>"
        for line in content.splitlines()
        if line.strip().startswith("- ")
    )
    return f"<ul>{items}</ul>"


def _render_cell_content(content: str) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    if trimmed.startswith((".. code-block::", ".. code::")):
        return _render_code_block(trimmed)
    if trimmed.startswith("- "):
        return _render_list(trimmed)
    if "\n" in trimmed:
        return process_inline(" ".join(line.strip() for line in trimmed.splitlines()))
    return process_inline(trimmed)


def is_grid_table(text: str) -> bool:
    """Return True if the text has at least three lines and opens with a ``+--+`` border."""
    lines = text.splitlines()
    if len(lines) < 3:
        return False
    first = lines[0].strip()
    return (
        first.startswith("+")
        and first.endswith("+")
        and ("-" in first or "=" in first)
    )


def convert_grid_table(text: str) -> str:
    """Render a grid table as HTML; a ``+===+`` border ends the header."""
    lines = text.splitlines()
    if len(lines) < 3:
        return f"<p>{escape_html(text)}</p>"

    positions = _column_positions(lines[0])
    if not positions:
        return f"<p>{escape_html(text)}</p>"

    header_end = next(
        (
            index
            for index, line in enumerate(lines)
            if line.strip().startswith("+")
            and "=" in line.strip()
            and "-" not in line.strip()
        ),
        None,
    )
    header_rows = 0
    if header_end is not None:
        header_rows = sum(
            1
            for index in range(1, header_end)
            if _is_grid_border(lines[index].strip())
        )

    parts = ['<table class="grid-table">\n']
    in_header = header_end is not None
    if in_header:
        parts.append("<thead>\n")

    for row_index, row in enumerate(_detect_rows(lines, positions)):
        if in_header and row_index >= header_rows:
            parts.append("</thead>\n<tbody>\n")
            in_header = False
        tag = "th" if row_index < header_rows else "td"
        cells = []
        for cell in row:
            if cell.skip:
                continue
            attrs = ""
            if cell.colspan > 1:
                attrs += f' colspan="{cell.colspan}"'
            if cell.rowspan > 1:
                attrs += f' rowspan="{cell.rowspan}"'
            cells.append(f"<{tag}{attrs}>{_render_cell_content(cell.content)}</{tag}>")
        parts.append(f"<tr>{''.join(cells)}</tr>\n")

    if not in_header and header_end is not None:
        parts.append("</tbody>\n")
    parts.append("</table>")
    return "".join(parts)