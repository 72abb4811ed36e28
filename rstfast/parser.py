"""Line classification for the line-based reStructuredText reader."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_ADORNMENT_CHARS = frozenset("=-~`:'\"^_*+#<>")
_ROMAN_DIGITS = frozenset("ivxlcdm")


class LineKind(Enum):
    """What a single source line looks like."""

    EMPTY = auto()
    SECTION_ADORNMENT = auto()
    BULLET_LIST_ITEM = auto()
    ENUMERATED_LIST_ITEM = auto()
    FIELD_LIST_ITEM = auto()
    DIRECTIVE_START = auto()
    DIRECTIVE_OPTION = auto()
    COMMENT = auto()
    SUBSTITUTION_DEF = auto()
    TARGET = auto()
    TRANSITION = auto()
    LINE_BLOCK_LINE = auto()
    LITERAL_BLOCK_MARKER = auto()
    GRID_TABLE_LINE = auto()
    SIMPLE_TABLE_BORDER = auto()
    DOCTEST_BLOCK = auto()
    INDENTED_LINE = auto()
    TEXT_LINE = auto()


@dataclass(frozen=True)
class LineInfo:
    """A classified line.

    ``values`` carries the kind's payload: the adornment character, the
    enumerator, a field's name and body, a directive's name and arguments,
    an option's name and value, a substitution's name, directive and
    arguments, or a target's name and URL. ``indent`` is set for indented lines.
    """

    kind: LineKind
    values: tuple[str, ...] = ()
    indent: int = 0


def _is_valid_enum_marker(marker: str) -> bool:
    if not marker:
        return False
    if marker == "#":
        return True
    if all(c in "0123456789" for c in marker):
        return True
    if len(marker) == 1 and marker.isascii() and marker.isalpha():
        return True
    return all(c in _ROMAN_DIGITS for c in marker.lower())


def _is_enumerated_list_item(text: str) -> bool:
    if text.startswith("("):
        close = text.find(")")
        return (
            close != -1
            and _is_valid_enum_marker(text[1:close])
            and text[close + 1 : close + 2] == " "
        )
    for pos, char in enumerate(text):
        if char in ".)":
            return (
                pos > 0
                and _is_valid_enum_marker(text[:pos])
                and text[pos + 1 : pos + 2] == " "
            )
        if char == " ":
            return False
    return False


def _extract_enum_marker(text: str) -> str:
    if text.startswith("("):
        close = text.find(")")
        if close != -1:
            return text[: close + 1]
    for pos, char in enumerate(text):
        if char in ".)":
            return text[: pos + 1]
    return ""


def _classify_explicit(rest: str) -> LineInfo:
    """Classify the text after a leading ``.. ``."""
    if rest.startswith("|"):
        pipe_end = rest.find("|", 1)
        if pipe_end != -1:
            name = rest[1:pipe_end]
            after = rest[pipe_end + 1 :].strip()
            colons = after.find("::")
            if colons != -1:
                directive = after[:colons].strip()
                args = after[colons + 2 :].strip()
                return LineInfo(LineKind.SUBSTITUTION_DEF, (name, directive, args))

    if rest.startswith("_"):
        target = rest[1:]
        colon = target.find(": ")
        if colon != -1:
            return LineInfo(
                LineKind.TARGET, (target[:colon].strip(), target[colon + 2 :].strip())
            )
        if target.endswith(":"):
            return LineInfo(LineKind.TARGET, (target[:-1].strip(), ""))

    colons = rest.find("::")
    if colons != -1:
        name = rest[:colons].strip()
        if name and " " not in name:
            return LineInfo(LineKind.DIRECTIVE_START, (name, rest[colons + 2 :].strip()))

    return LineInfo(LineKind.COMMENT)


def classify_line(line: str) -> LineInfo:
    """Classify one line of reStructuredText source."""
    trimmed = line.strip()
    if not trimmed:
        return LineInfo(LineKind.EMPTY)

    if trimmed.startswith(">>>"):
        return LineInfo(LineKind.DOCTEST_BLOCK)
    if trimmed.startswith("| ") or trimmed == "|":
        return LineInfo(LineKind.LINE_BLOCK_LINE)
    if trimmed == "::":
        return LineInfo(LineKind.LITERAL_BLOCK_MARKER)

    if (
        trimmed.startswith("+")
        and trimmed.endswith("+")
        and ("-" in trimmed or "=" in trimmed)
    ):
        return LineInfo(LineKind.GRID_TABLE_LINE)
    if trimmed.startswith("|") and trimmed.endswith("|"):
        return LineInfo(LineKind.GRID_TABLE_LINE)

    if set(trimmed) == {"=", " "}:
        return LineInfo(LineKind.SIMPLE_TABLE_BORDER)

    if len(trimmed) >= 4:
        first = trimmed[0]
        if first in _ADORNMENT_CHARS and trimmed == first * len(trimmed):
            return LineInfo(LineKind.SECTION_ADORNMENT, (first,))

    if trimmed.startswith(".. "):
        return _classify_explicit(trimmed[3:])

    if trimmed.startswith(":") and not trimmed.startswith("::"):
        second = trimmed.find(":", 1)
        if second != -1:
            name = trimmed[1:second]
            if name:
                value = trimmed[second + 1 :].strip()
                return LineInfo(LineKind.FIELD_LIST_ITEM, (name, value))

    if trimmed.startswith(("- ", "* ", "+ ")) and len(trimmed) > 2:
        return LineInfo(LineKind.BULLET_LIST_ITEM)

    if _is_enumerated_list_item(trimmed):
        return LineInfo(LineKind.ENUMERATED_LIST_ITEM, (_extract_enum_marker(trimmed),))

    indent = len(line) - len(line.lstrip())
    if indent > 0 and trimmed.startswith(":"):
        end_colon = trimmed.find(":", 1)
        if end_colon != -1:
            name = trimmed[1:end_colon]
            if " " not in name or len(name) < 30:
                value = trimmed[end_colon + 1 :].strip()
                return LineInfo(LineKind.DIRECTIVE_OPTION, (name, value))

    if indent > 0:
        return LineInfo(LineKind.INDENTED_LINE, indent=indent)

    return LineInfo(LineKind.TEXT_LINE)


def parse_directive_options(lines: Iterable[str]) -> tuple[dict[str, str], int]:
    """Read leading ``:name: value`` lines; return the options and lines consumed."""
    options: dict[str, str] = {}
    consumed = 0
    for line in lines:
        trimmed = line.strip()
        if not trimmed.startswith(":"):
            break
        end_colon = trimmed.find(":", 1)
        if end_colon == -1:
            break
        options[trimmed[1:end_colon]] = trimmed[end_colon + 1 :].strip()
        consumed += 1
    return options, consumed