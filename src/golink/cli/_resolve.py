"""``golink resolve`` — resolve a URL against a link file."""

import argparse
import sys

from golink.cli._links import load_links
from golink.errors import GolinkError
from golink.outcomes import MetadataRequest, RedirectRequest
from golink.resolver import resolve


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` and print the outcome.

    Prints the redirect URL, or ``metadata: <shortlink>`` for metadata
    requests. Resolution errors go to stderr with exit code 1.
    """
    try:
        links = load_links(args.links)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        outcome = resolve(args.url, links.get)
    except GolinkError as exc:
        print(f"Error: {exc} ({exc.status})", file=sys.stderr)
        raise SystemExit(1) from exc

    match outcome:
        case RedirectRequest(url=url):
            print(url)
        case MetadataRequest(shortlink=shortlink):
            print(f"metadata: {shortlink}")
