"""Inline reStructuredText markup: emphasis, literals, roles, links and escapes."""

from __future__ import annotations

import re

from rstfast.roles import render_role
from rstfast.text import escape_html

_ESCAPABLE = frozenset("_{}[]()#+-.!~|")
_ESCAPE_OUTPUT = {
    "\\": "\\",
    "*": "*",
    "`": "`",
    "<": "&lt;",
    ">": "&gt;",
}
_PLAIN_OUTPUT = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}
_INLINE_START_PUNCTUATION = frozenset("([{</'\"-")

_DOUBLE_STAR_END = re.compile(r"\*\*(?!\*)")
_SINGLE_STAR_END = re.compile(r"\*(?!\*)")
_LINK_END = re.compile(r"`_")


def _is_inline_start(text: str, pos: int) -> bool:
    if pos == 0:
        return True
    prev = text[pos - 1]
    return prev.isspace() or prev in _INLINE_START_PUNCTUATION


def _find(pattern: re.Pattern[str], text: str, start: int) -> int | None:
    match = pattern.search(text, start)
    return match.start() if match else None


def _find_substring(text: str, needle: str, start: int) -> int | None:
    pos = text.find(needle, start)
    return pos if pos != -1 else None


def _parse_role(text: str, start: int) -> tuple[str, str, int] | None:
    """Parse ``:name:`content``` at ``start``; return name, content and end."""
    pos = start + 1
    length = len(text)
    while pos < length and text[pos] not in ":`" and not text[pos].isspace():
        pos += 1
    if pos >= length or text[pos] != ":":
        return None
    name = text[start + 1 : pos]
    if not name:
        return None
    pos += 1
    if pos >= length or text[pos] != "`":
        return None
    content_start = pos + 1
    close = text.find("`", content_start)
    if close == -1:
        return None
    return name, text[content_start:close], close + 1


def _parse_external_link(text: str, start: int) -> tuple[str, str, int] | None:
    """Parse ```text <url>`_`` (or ``__``) at ``start``."""
    close = _find(_LINK_END, text, start + 1)
    if close is None:
        return None
    body = text[start + 1 : close]
    end = close + 3 if text.startswith("_", close + 2) else close + 2
    angle = body.rfind("<")
    if angle == -1 or not body.endswith(">"):
        return None
    return body[:angle].strip(), body[angle + 1 : -1], end


def _parse_substitution(text: str, start: int) -> tuple[str, int] | None:
    """Parse ``|name|`` at ``start``; the name may not span lines."""
    pos = start + 1
    length = len(text)
    while pos < length and text[pos] not in "|\n":
        pos += 1
    if pos >= length or text[pos] != "|":
        return None
    name = text[start + 1 : pos]
    if not name:
        return None
    return name, pos + 1


def process_inline(text: str) -> str:
    """Convert the inline markup in ``text`` to HTML, escaping plain text."""
    out: list[str] = []
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if char == "\\" and i + 1 < length:
            following = text[i + 1]
            if following == " ":
                i += 2
            elif following in _ESCAPE_OUTPUT:
                out.append(_ESCAPE_OUTPUT[following])
                i += 2
            elif following in _ESCAPABLE:
                out.append(following)
                i += 2
            else:
                out.append("\\")
                i += 1
            continue

        if text.startswith("``", i):
            end = _find_substring(text, "``", i + 2)
            if end is not None:
                out.append(f"<code>{escape_html(text[i + 2 : end])}</code>")
                i = end + 2
                continue

        if char == ":":
            role = _parse_role(text, i)
            if role is not None:
                name, content, i = role
                out.append(render_role(name, content))
                continue

        if char == "*" and _is_inline_start(text, i):
            if text.startswith("***", i):
                end = _find_substring(text, "***", i + 3)
                if end is not None:
                    inner = escape_html(text[i + 3 : end])
                    out.append(f"<strong><em>{inner}</em></strong>")
                    i = end + 3
                    continue
            if text.startswith("**", i):
                end = _find(_DOUBLE_STAR_END, text, i + 2)
                if end is not None:
                    inner = process_inline(text[i + 2 : end])
                    out.append(f"<strong>{inner}</strong>")
                    i = end + 2
                    continue
            end = _find(_SINGLE_STAR_END, text, i + 1)
            if end is not None:
                out.append(f"<em>{process_inline(text[i + 1 : end])}</em>")
                i = end + 1
                continue

        if char == "`":
            link = _parse_external_link(text, i)
            if link is not None:
                display, url, i = link
                out.append(f'<a href="{escape_html(url)}">{escape_html(display)}</a>')
                continue

        if char == "|":
            substitution = _parse_substitution(text, i)
            if substitution is not None:
                name, i = substitution
                out.append(f"|{name}|")
                continue

        out.append(_PLAIN_OUTPUT.get(char, char))
        i += 1

    return "".join(out)