"""Long-URL template parsing and expansion.

Two mechanisms share this module:

- **Explicit templating**: ``{path}`` and ``{{ if path }}...{{ endif }}``
  tags place the remaining path where the long URL wants it.
- **Implicit append**: a long URL with no tags at all gets the remaining
  path appended to its path (``http://example.com`` + ``a/b`` ->
  ``http://example.com/a/b``).

A single recognized tag anywhere switches the whole template to explicit
mode; implicit append never runs on a tagged template.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from urllib.parse import urlsplit, urlunsplit

from golink.errors import UnexpectedToken, UnterminatedConditional
from golink.paths import join_path
from golink.templating.lexer import has_tags, tokenize
from golink.templating.nodes import ConditionalNode, Node, PathNode, TextNode


@dataclass(slots=True)
class _OpenBlock:
    """An ``{{ if }}`` seen by the parser whose ``{{ endif }}`` is pending."""

    start: int
    negated: bool
    body: list[Node] = field(default_factory=list)
    else_body: list[Node] | None = None

    @property
    def current(self) -> list[Node]:
        return self.body if self.else_body is None else self.else_body


def parse_template(template: str) -> tuple[Node, ...]:
    """Parse *template* into a tuple of nodes.

    Raises ``UnterminatedConditional`` if an ``{{ if path }}`` is never
    closed, and ``UnexpectedToken`` for an ``{{ else }}`` or ``{{ endif }}``
    with no open block (or a second ``{{ else }}`` in one block).
    """
    root: list[Node] = []
    stack: list[_OpenBlock] = []

    for token in tokenize(template):
        out = stack[-1].current if stack else root

        if token.kind == "text":
            out.append(TextNode(token.text))
        elif token.kind == "path":
            out.append(PathNode())
        elif token.kind in ("if", "if_not"):
            stack.append(_OpenBlock(start=token.start, negated=token.kind == "if_not"))
        elif token.kind == "else":
            if not stack or stack[-1].else_body is not None:
                raise UnexpectedToken(token.text, token.start)
            stack[-1].else_body = []
        else:
            if not stack:
                raise UnexpectedToken(token.text, token.start)
            block = stack.pop()
            node = ConditionalNode(
                body=tuple(block.body),
                else_body=tuple(block.else_body or ()),
                negated=block.negated,
            )
            (stack[-1].current if stack else root).append(node)

    if stack:
        raise UnterminatedConditional(stack[-1].start)

    return tuple(root)


def validate_template(template: str) -> None:
    """Raise a ``TemplateError`` if *template* would fail to expand.

    Useful before storing a new long URL.
    """
    parse_template(template)


def render(nodes: Sequence[Node], path: str) -> str:
    """Render parsed *nodes* with *path* as the ``{path}`` value.

    The ``if path`` predicate is true when *path* is non-empty.
    """
    parts: list[str] = []
    for node in nodes:
        match node:
            case TextNode():
                parts.append(node.text)
            case PathNode():
                parts.append(path)
            case ConditionalNode():
                taken = bool(path) != node.negated
                parts.append(render(node.body if taken else node.else_body, path))
    return "".join(parts)


def expand(template: str, remaining: Sequence[str], *, append_path: bool = True) -> str:
    """Expand a stored long URL against the remaining path segments.

    Examples::

        >>> expand("{path}", ["a", "b"])
        'a/b'
        >>> expand("X{{ if path }}Y{{ endif }}Z", [])
        'XZ'
        >>> expand("http://example.com", ["bar", "baz"])
        'http://example.com/bar/baz'

    Set *append_path* to False to return tag-free templates unchanged.
    """
    path = join_path(remaining)

    if not has_tags(template):
        if not append_path or not path:
            return template
        return append_to_url(template, path)

    return render(parse_template(template), path)


def append_to_url(url: str, path: str) -> str:
    """Append *path* to the path of *url*.

    Absolute URLs keep their query string and fragment after the new path,
    and a trailing ``/`` on the base path is collapsed::

        >>> append_to_url("http://example.com/test.html?a=b", "x/y")
        'http://example.com/test.html/x/y?a=b'

    Anything that is not an absolute URL gets ``/path`` appended verbatim.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return f"{url}/{path}"

    if not (parts.scheme and parts.netloc):
        return f"{url}/{path}"

    base = parts.path.rstrip("/")
    return urlunsplit(parts._replace(path=f"{base}/{path}"))
