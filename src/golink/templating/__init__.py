"""Templating — the long-URL mini-language.

Stored long URLs may place the remaining request path with ``{path}`` and
branch on its presence with ``{{ if path }}...{{ else }}...{{ endif }}``.
Long URLs without tags get the remaining path appended instead.
"""

from golink.templating.engine import expand, parse_template, render, validate_template

__all__ = ["expand", "parse_template", "render", "validate_template"]
