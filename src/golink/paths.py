"""Input path splitting.

Turns a raw request (full URL or bare path) into the ordered, non-empty
path segments the resolver works on. The scheme, host, query string and
fragment never reach the resolver.
"""

import re
from collections.abc import Iterable

# Only a scheme at the very start marks a full URL; "/wayback/https://..." is a path
_SCHEME_AND_HOST = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/]*")


def split_path(raw: str) -> list[str]:
    """Split *raw* into non-empty path segments.

    Examples::

        "http://go/foo/bar"  -> ["foo", "bar"]
        "/foo//bar/"         -> ["foo", "bar"]
        "foo"                -> ["foo"]
        "http://go/"         -> []
        "/prs?x=1#top"       -> ["prs"]
        "/login?next=http://evil/foo" -> ["login"]

    Malformed input degrades to a shorter (possibly empty) list; this
    function never raises.
    """
    path = raw.strip()

    # Query and fragment are not part of the path
    for delimiter in ("?", "#"):
        path, _, _ = path.partition(delimiter)

    path = _SCHEME_AND_HOST.sub("", path, count=1)

    return [part for part in path.split("/") if part]


def join_path(segments: Iterable[str]) -> str:
    """Rejoin segments with ``/``. The inverse of ``split_path`` on clean paths."""
    return "/".join(segments)
