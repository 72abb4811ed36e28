"""Rendering of interpreted-text roles to HTML."""

from __future__ import annotations

from collections.abc import Callable

from rstfast.text import escape_html, slugify


def _wrap(open_tag: str, close_tag: str) -> Callable[[str], str]:
    def render(content: str) -> str:
        return f"{open_tag}{escape_html(content)}{close_tag}"

    return render


def _parse_display_and_target(content: str) -> tuple[str, str] | None:
    """Split ``"Display <target>"`` into its parts, if it has that shape."""
    angle = content.rfind("<")
    if angle != -1 and content.endswith(">"):
        display = content[:angle].strip()
        target = content[angle + 1 : -1]
        if display:
            return display, target
    return None


def _render_ref(content: str) -> str:
    parsed = _parse_display_and_target(content)
    display, target = parsed if parsed else (content, content)
    return (
        f'<a href="#{escape_html(target)}" class="reference internal">'
        f"{escape_html(display)}</a>"
    )


def _render_doc(content: str) -> str:
    parsed = _parse_display_and_target(content)
    if parsed:
        display, target = parsed
        href = target if target.endswith(".html") else f"{target}.html"
    else:
        display, href = content, f"{content}.html"
    return (
        f'<a href="{escape_html(href)}" class="reference internal">'
        f"{escape_html(display)}</a>"
    )


def _render_term(content: str) -> str:
    parsed = _parse_display_and_target(content)
    display, target = parsed if parsed else (content, content)
    return (
        f'<a href="#term-{slugify(target)}" class="reference internal">'
        f"{escape_html(display)}</a>"
    )


def _render_abbr(content: str) -> str:
    paren = content.find("(")
    if paren != -1 and content.endswith(")"):
        abbr = content[:paren].strip()
        expansion = content[paren + 1 : -1]
        return f'<abbr title="{escape_html(expansion)}">{escape_html(abbr)}</abbr>'
    return f"<abbr>{escape_html(content)}</abbr>"


def _render_pep(content: str) -> str:
    return f'<a href="https://peps.python.org/pep-{content}/">PEP {content}</a>'


def _render_rfc(content: str) -> str:
    return (
        f'<a href="https://datatracker.ietf.org/doc/html/rfc{content}">'
        f"RFC {content}</a>"
    )


_XREF_ROLES = ("class", "func", "meth", "mod", "attr", "exc", "obj", "data", "const", "type")

_RENDERERS: dict[str, Callable[[str], str]] = {
    "emphasis": _wrap("<em>", "</em>"),
    "strong": _wrap("<strong>", "</strong>"),
    "literal": _wrap("<code>", "</code>"),
    "code": _wrap("<code>", "</code>"),
    "subscript": _wrap("<sub>", "</sub>"),
    "sub": _wrap("<sub>", "</sub>"),
    "superscript": _wrap("<sup>", "</sup>"),
    "sup": _wrap("<sup>", "</sup>"),
    "title-reference": _wrap("<cite>", "</cite>"),
    "title": _wrap("<cite>", "</cite>"),
    "t": _wrap("<cite>", "</cite>"),
    "kbd": _wrap("<kbd>", "</kbd>"),
    "dfn": _wrap("<dfn>", "</dfn>"),
    "samp": _wrap("<samp>", "</samp>"),
    "guilabel": _wrap('<span class="guilabel">', "</span>"),
    "menuselection": _wrap('<span class="menuselection">', "</span>"),
    "file": _wrap('<code class="file">', "</code>"),
    "command": _wrap('<strong class="command">', "</strong>"),
    "program": _wrap('<strong class="program">', "</strong>"),
    "option": _wrap('<code class="option">', "</code>"),
    "envvar": _wrap('<code class="envvar">', "</code>"),
    "makevar": _wrap('<code class="makevar">', "</code>"),
    "math": _wrap('<span class="math-inline">', "</span>"),
    "ref": _render_ref,
    "doc": _render_doc,
    "term": _render_term,
    "abbr": _render_abbr,
    "abbreviation": _render_abbr,
    "pep": _render_pep,
    "rfc": _render_rfc,
    **{name: _wrap('<code class="xref">', "</code>") for name in _XREF_ROLES},
}


def render_role(role: str, content: str) -> str:
    """Render ``:role:`content``` as HTML; unknown roles become a classed span."""
    renderer = _RENDERERS.get(role)
    if renderer is not None:
        return renderer(content)
    return f'<span class="role-{escape_html(role)}">{escape_html(content)}</span>'