"""
Command-line interface for valuetypes.

Values are given as JSON literals (``null``, ``42``, ``"42"``, ``[1, 2]``,
``{"a": 1}``); anything that is not valid JSON is taken as a raw string.

Usage:
    valuetypes classify '[1, 2]'
    valuetypes match 12345 string number
    valuetypes match null object --optional
    valuetypes resolve os.path.sep
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from valuetypes.resolver import classify
from valuetypes.core.exceptions import InvalidDescriptorError
from valuetypes.core.logger import configure_root_logger, get_logger
from valuetypes.matching import matches
from valuetypes.namespace import resolve_path

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_INVALID_DESCRIPTOR = 2


def parse_value(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _run_classify(args: argparse.Namespace) -> int:
    print(classify(parse_value(args.value)))
    return EXIT_OK


def _run_match(args: argparse.Namespace) -> int:
    value = parse_value(args.value)
    descriptor: Any = args.types[0] if len(args.types) == 1 else list(args.types)
    try:
        result = matches(value, descriptor, {"optional": args.optional})
    except InvalidDescriptorError as e:
        logger.error(f"Invalid type descriptor: {e}")
        return EXIT_INVALID_DESCRIPTOR
    print("true" if result else "false")
    return EXIT_OK if result else EXIT_NO_MATCH


def _run_resolve(args: argparse.Namespace) -> int:
    resolved = resolve_path(args.path)
    if resolved is None:
        logger.info(f"Nothing found at {args.path!r}")
        return EXIT_NO_MATCH
    print(repr(resolved))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valuetypes",
        description="Classify values and check them against type descriptors",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for valuetypes logs (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Print the category of a value"
    )
    classify_parser.add_argument("value", help="JSON literal or raw string")
    classify_parser.set_defaults(handler=_run_classify)

    match_parser = subparsers.add_parser(
        "match",
        help="Check a value against one or more type names"
    )
    match_parser.add_argument("value", help="JSON literal or raw string")
    match_parser.add_argument("types", nargs="+", help="Type names; several mean 'any of'")
    match_parser.add_argument(
        "--optional",
        action="store_true",
        help="Let null match any type"
    )
    match_parser.set_defaults(handler=_run_match)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a dotted path against the loaded modules and builtins"
    )
    resolve_parser.add_argument("path", help="Dotted path, e.g. os.path.sep")
    resolve_parser.set_defaults(handler=_run_resolve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_root_logger(args.log_level)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return EXIT_OK
    return handler(args)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
