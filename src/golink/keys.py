"""Shortlink key normalization.

``My-Service``, ``my-service`` and ``myservice`` are the same shortlink.
Both the resolver and anything that stores shortlinks must agree on the
canonical form, so the rules live here and nowhere else.
"""

import re
from urllib.parse import unquote

from golink.paths import split_path

# str.lower() also folds non-ASCII letters; keys only fold A-Z
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_IGNORED = re.compile(r"[-\s]")


def normalize_key(segment: str) -> str:
    """Canonicalize a single shortlink segment.

    ASCII letters are lower-cased; hyphens and whitespace are removed.
    Idempotent: ``normalize_key(normalize_key(x)) == normalize_key(x)``.
    """
    return _IGNORED.sub("", segment.translate(_ASCII_LOWER))


def normalize_shortlink(text: str) -> str:
    """Normalize the first path segment of *text*.

    Use this before storing a new shortlink so the stored key matches what
    ``resolve()`` will look up::

        >>> normalize_shortlink("My-Service")
        'myservice'
        >>> normalize_shortlink("/foo/bar/baz")
        'foo'
        >>> normalize_shortlink("My-Service/docs")
        'myservice'

    Returns an empty string when *text* has no path segment.
    """
    segments = split_path(text)
    if not segments:
        return ""
    return key_from_segment(segments[0])


def key_from_segment(segment: str) -> str:
    """Normalize a shortlink segment as it arrives in a request URL.

    Percent-escapes are decoded first, so ``my%20service`` and
    ``My-Service`` are the same key. Only the key is decoded; the remaining
    segments are substituted into long URLs still encoded.
    """
    return normalize_key(unquote(segment))
