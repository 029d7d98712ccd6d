"""CLI entry point for inspecting and exercising the error catalogue."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from typesmith.internals.errors import raise_error
from typesmith.internals.messages import Category, ErrorKind, kinds_in, lookup
from typesmith.internals.report import EXIT_ERRORS, EXIT_OK, Reporter, guard
from typesmith.internals.version import print_banner


def parse_property(spec: str) -> tuple[str, Any]:
    """Split ``NAME=VALUE``; VALUE is read as JSON when it parses, else kept as text."""
    name, sep, raw = spec.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {spec!r}")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    return name, value


def print_catalogue(category: Optional[Category] = None) -> int:
    kinds = kinds_in(category) if category else list(ErrorKind)
    for kind in kinds:
        print(f"{kind.code}  {kind.name:<36} {kind.template}")
    return EXIT_OK


def print_explanation(key: str) -> int:
    """Print everything known about one catalogue entry.

    Returns:
        0 on success, 2 if `key` names no kind.
    """
    try:
        kind = lookup(key)
    except KeyError as e:
        print(f"error: {e.args[0]}", file=sys.stderr)
        return EXIT_ERRORS

    props = ", ".join(kind.placeholders) or "(none)"
    print(f"{kind.code}: {kind.name}")
    print(f"Category:   {kind.category.value}")
    print(f"Template:   {kind.template}")
    print(f"Properties: {props}")
    if kind.doc:
        print()
        print(kind.doc)
    return EXIT_OK


def raise_and_report(key: str, properties: Dict[str, Any], as_json: bool = False) -> int:
    """Raise `key` with `properties` behind a failure boundary and print the result."""
    try:
        kind = lookup(key)
    except KeyError as e:
        print(f"error: {e.args[0]}", file=sys.stderr)
        return EXIT_ERRORS

    reporter = Reporter()
    status = guard(lambda: raise_error(kind, properties), reporter, source="typesmith-errors")
    if as_json:
        reporter.print_json()
    else:
        reporter.print()
    return status


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="typesmith-errors",
                                 description="Inspect the typesmith error catalogue")

    ap.add_argument("--version", action="store_true", help="Show version and exit")
    ap.add_argument("--list", action="store_true", help="List every error kind")
    ap.add_argument(
        "--category",
        choices=[c.value for c in Category],
        help="Restrict --list to one category",
    )
    ap.add_argument("--explain", metavar="KIND", help="Describe an error kind (name or code)")
    ap.add_argument("--raise", dest="raise_kind", metavar="KIND",
                    help="Raise an error kind and print the resulting diagnostic")
    ap.add_argument(
        "-p", "--property",
        dest="properties",
        metavar="NAME=VALUE",
        action="append",
        type=parse_property,
        default=[],
        help="Property for --raise (repeatable); VALUE is parsed as JSON when possible",
    )
    ap.add_argument("--json", action="store_true", help="Print --raise diagnostics as JSON")
    args = ap.parse_args(argv)

    if args.version:
        print_banner()
        return EXIT_OK

    if args.explain:
        return print_explanation(args.explain)

    if args.raise_kind:
        return raise_and_report(args.raise_kind, dict(args.properties), as_json=args.json)

    if args.list or args.category:
        return print_catalogue(Category(args.category) if args.category else None)

    ap.print_help(sys.stderr)
    return EXIT_ERRORS
