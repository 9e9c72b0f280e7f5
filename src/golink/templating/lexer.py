"""Tag scanner for long-URL templates.

Recognizes exactly these tags (whitespace inside the braces is ignored)::

    {path}
    {{ if path }}   {{ if not path }}   {{ else }}   {{ endif }}

Anything else, including unknown ``{{ ... }}`` text, is literal.
"""

import re
from dataclasses import dataclass

_TAG_PATTERN = re.compile(
    r"\{\{\s*(?P<block>if\s+not\s+path|if\s+path|else|endif)\s*\}\}"
    r"|\{\s*(?P<value>path)\s*\}"
)


@dataclass(frozen=True, slots=True)
class Token:
    """A scanned piece of a template.

    ``kind`` is one of ``text``, ``path``, ``if``, ``if_not``, ``else``,
    ``endif``. ``start`` is the offset of the token in the template.
    """

    kind: str
    text: str
    start: int


def tokenize(template: str) -> list[Token]:
    """Scan *template* into literal and tag tokens, in source order."""
    tokens: list[Token] = []
    pos = 0

    for match in _TAG_PATTERN.finditer(template):
        if pos < match.start():
            tokens.append(Token("text", template[pos : match.start()], pos))
        tokens.append(Token(_kind(match), match.group(0), match.start()))
        pos = match.end()

    if pos < len(template):
        tokens.append(Token("text", template[pos:], pos))

    return tokens


def has_tags(template: str) -> bool:
    """Return True if *template* contains at least one recognized tag."""
    return _TAG_PATTERN.search(template) is not None


def _kind(match: re.Match[str]) -> str:
    block = match.group("block")
    if block is None:
        return "path"
    words = block.split()
    if words[0] == "if":
        return "if_not" if len(words) == 3 else "if"
    return block
