"""``golink check`` — validate every long URL in a link file.

Prints one line per broken template and exits with code 1 if any are
found, so it can gate a deploy of the link table.
"""

import argparse
import sys

from golink.cli._links import load_links
from golink.errors import TemplateError
from golink.templating import validate_template


def run_check(args: argparse.Namespace) -> None:
    """Parse every template in ``args.links`` and report failures."""
    try:
        links = load_links(args.links)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    failures = 0
    for shortlink, long_url in sorted(links.items()):
        try:
            validate_template(long_url)
        except TemplateError as exc:
            failures += 1
            print(f"  {shortlink}: {exc}", file=sys.stderr)

    if failures:
        print(f"{failures} of {len(links)} shortlinks have broken templates.", file=sys.stderr)
        raise SystemExit(1)

    print(f"{len(links)} shortlinks OK.")
