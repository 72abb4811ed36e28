"""Small text helpers shared by the HTML renderers."""

from __future__ import annotations

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)


def escape_html(text: str) -> str:
    """Escape characters that are special in HTML text and attribute values."""
    return text.translate(_HTML_ESCAPES)


def slugify(text: str) -> str:
    """Turn text into a lower-case, hyphen-separated identifier."""
    words: list[str] = []
    current: list[str] = []
    for char in text.lower():
        if char.isalnum():
            current.append(char)
        elif current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return "-".join(words)