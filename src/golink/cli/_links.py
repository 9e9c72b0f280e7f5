"""Link file loading — reads a shortlink table for ``golink resolve``/``check``.

Two formats, chosen by extension::

    # links.toml — either top-level keys or a [links] table
    [links]
    prs = "https://github.com/pulls?q=review-requested:{{ if path }}{path}{{ else }}@me{{ endif }}"
    docs = "https://docs.example.com"

    // links.json
    {"prs": "...", "docs": "https://docs.example.com"}

Keys are normalized on load so ``My-Docs`` and ``mydocs`` cannot both be
defined.
"""

import json
import tomllib
from pathlib import Path
from typing import Any

from golink.keys import normalize_shortlink


def load_links(path: str | Path) -> dict[str, str]:
    """Load a link file into a ``{normalized shortlink: long URL}`` dict.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is malformed, a value is not a string, a
            key normalizes to nothing, or two keys collide after
            normalization.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"{path}: invalid JSON: {exc}"
            raise ValueError(msg) from exc
    else:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            msg = f"{path}: invalid TOML: {exc}"
            raise ValueError(msg) from exc
        if isinstance(data.get("links"), dict):
            data = data["links"]

    if not isinstance(data, dict):
        msg = f"{path}: expected a table of shortlinks, got {type(data).__name__}"
        raise ValueError(msg)

    links: dict[str, str] = {}
    seen_as: dict[str, str] = {}
    for name, long_url in data.items():
        if not isinstance(long_url, str):
            msg = f"{path}: {name!r} must map to a string, got {type(long_url).__name__}"
            raise ValueError(msg)
        key = normalize_shortlink(name)
        if not key:
            msg = f"{path}: {name!r} is not a valid shortlink"
            raise ValueError(msg)
        if key in links:
            msg = f"{path}: {name!r} and {seen_as[key]!r} are the same shortlink {key!r}"
            raise ValueError(msg)
        links[key] = long_url
        seen_as[key] = name

    return links
