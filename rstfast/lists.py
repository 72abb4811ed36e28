"""Option lists and list-marker handling."""

from __future__ import annotations

from rstfast.inline import process_inline
from rstfast.text import escape_html

_BULLETS = ("-", "*", "+")
_ROMAN_DIGITS = frozenset("ivxlcdm")


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_valid_enumerator(marker: str) -> bool:
    if not marker:
        return False
    if marker == "#":
        return True
    if all(c in "0123456789" for c in marker):
        return True
    if len(marker) == 1 and marker.isascii() and marker.isalpha():
        return True
    return all(c in _ROMAN_DIGITS for c in marker.lower())


def is_option_line(line: str) -> bool:
    """Return True if the line starts with a ``-x``, ``--long`` or ``/X`` option."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed[0] == "-":
        if len(trimmed) < 2:
            return False
        if trimmed[1] == "-":
            return len(trimmed) >= 3 and _is_ascii_alnum(trimmed[2])
        return _is_ascii_alnum(trimmed[1])
    if trimmed[0] == "/":
        return len(trimmed) >= 2 and _is_ascii_alnum(trimmed[1])
    return False


def is_option_list(text: str) -> bool:
    """Return True if at least half of the non-blank lines are option lines."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return False
    option_count = sum(1 for line in lines if is_option_line(line))
    return option_count > 0 and option_count * 2 >= len(lines)


def parse_option_line(line: str) -> tuple[str, str]:
    """Split an option line at the first run of two spaces into option and description."""
    trimmed = line.strip()
    split_at = trimmed.find("  ")
    if split_at == -1:
        return trimmed, ""
    return trimmed[:split_at].strip(), trimmed[split_at:].strip()


def _option_entry(option: str, description: str) -> str:
    return (
        f"<dt><code>{escape_html(option)}</code></dt>\n"
        f"<dd>{process_inline(description.strip())}</dd>\n"
    )


def convert_option_list(text: str, line_num: int, add_data_line: bool) -> str:
    """Render an option list as an HTML definition list."""
    data_line = f' data-line="{line_num}"' if add_data_line else ""
    parts = [f'<dl class="option-list"{data_line}>\n']

    option = ""
    description_parts: list[str] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue
        if is_option_line(trimmed):
            if option:
                parts.append(_option_entry(option, " ".join(description_parts)))
            option, description = parse_option_line(trimmed)
            description_parts = [description] if description else []
        else:
            description_parts.append(trimmed)

    if option:
        parts.append(_option_entry(option, " ".join(description_parts)))

    parts.append("</dl>")
    return "".join(parts)


def strip_bullet_marker(line: str) -> str:
    """Remove a leading ``-``, ``*`` or ``+`` bullet marker."""
    trimmed = line.lstrip()
    if trimmed.startswith(tuple(f"{b} " for b in _BULLETS)):
        return trimmed[2:]
    if trimmed.startswith(_BULLETS):
        return trimmed[1:].lstrip()
    return line


def strip_enumerated_marker(line: str) -> str:
    """Remove a leading enumerator such as ``1.``, ``(a)``, ``iv)`` or ``#.``."""
    trimmed = line.lstrip()

    if trimmed.startswith("("):
        close = trimmed.find(")")
        if close != -1 and _is_valid_enumerator(trimmed[1:close]):
            return trimmed[close + 1 :].lstrip()

    for separator in (". ", ") "):
        pos = trimmed.find(separator)
        if pos != -1 and _is_valid_enumerator(trimmed[:pos]):
            return trimmed[pos + 2 :]

    return line