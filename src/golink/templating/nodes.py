"""Parsed template nodes."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextNode:
    """Literal text, copied through unchanged."""

    text: str


@dataclass(frozen=True, slots=True)
class PathNode:
    """``{path}`` — the remaining path segments joined with ``/``."""


@dataclass(frozen=True, slots=True)
class ConditionalNode:
    """``{{ if path }} body {{ else }} else_body {{ endif }}``.

    ``negated`` is set for ``{{ if not path }}``. ``else_body`` is empty
    when the block has no ``{{ else }}`` clause.
    """

    body: tuple["Node", ...]
    else_body: tuple["Node", ...] = ()
    negated: bool = False


Node = TextNode | PathNode | ConditionalNode
