"""Golink CLI — try out and validate a link table from the shell.

Entry point registered as ``golink`` in ``pyproject.toml``::

    [project.scripts]
    golink = "golink.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``golink`` command."""
    parser = argparse.ArgumentParser(
        prog="golink",
        description="golink — resolve go/ shortlinks to long URLs.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution steps to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- golink resolve ---------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a shortlink URL")
    resolve_parser.add_argument("url", help="URL or path to resolve (e.g. http://go/prs/alice)")
    resolve_parser.add_argument(
        "--links",
        required=True,
        help="TOML or JSON file mapping shortlinks to long URLs",
    )

    # -- golink normalize -------------------------------------------------
    normalize_parser = subparsers.add_parser(
        "normalize", help="Print the normalized form of a shortlink"
    )
    normalize_parser.add_argument("shortlink", help="Shortlink as a user would type it")

    # -- golink check -----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate long URL templates")
    check_parser.add_argument(
        "--links",
        required=True,
        help="TOML or JSON file mapping shortlinks to long URLs",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "resolve":
        from golink.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "normalize":
        from golink.keys import normalize_shortlink

        key = normalize_shortlink(args.shortlink)
        if not key:
            print(f"Error: {args.shortlink!r} is not a valid shortlink", file=sys.stderr)
            raise SystemExit(1)
        print(key)
    elif args.command == "check":
        from golink.cli._check import run_check

        run_check(args)
