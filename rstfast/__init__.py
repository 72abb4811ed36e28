"""Building blocks for rendering reStructuredText as HTML: inline markup, roles, line classification, lists and tables."""

__version__ = "0.1.0"

__all__ = ["grid", "inline", "lists", "parser", "roles", "tables", "text"]