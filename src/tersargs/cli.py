"""tersargs CLI: try a schema against a token list from the shell."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from typing import List, Optional

from tersargs._internal.log import get_logger
from tersargs.errors import SchemaError

EXIT_OK = 0
EXIT_INVALID_ARGUMENTS = 1
EXIT_SCHEMA_ERROR = 2

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    try:
        tersargs_version = get_version("tersargs")
    except PackageNotFoundError:
        tersargs_version = "dev"

    parser = argparse.ArgumentParser(
        prog="tersargs",
        description="tersargs: parse single-letter flags against a compact schema"
    )
    parser.add_argument("--version", action="version", version=f"tersargs {tersargs_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--schema",
        required=True,
        help="Schema text, e.g. 'l,p#,d*' (bool, integer, string)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Scan tokens against a schema and print the result as JSON",
        parents=[parent_parser]
    )
    parse_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the JSON result; only the exit status and errors are reported."
    )
    parse_parser.add_argument(
        "tokens",
        nargs="*",
        help="Tokens to scan; put them after '--' so flags are not read as options"
    )

    # usage command
    subparsers.add_parser(
        "usage",
        help="Print the usage line for a schema",
        parents=[parent_parser]
    )

    # check-schema command
    subparsers.add_parser(
        "check-schema",
        help="Compile a schema and print the declared kinds as JSON",
        parents=[parent_parser]
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for tersargs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_INVALID_ARGUMENTS)

    # Lazy imports: only load the kernel (and configure logging) when a command runs
    from tersargs._internal.canonical_json import canonical_dumps
    from tersargs._internal.log import configure_logging
    from tersargs.kernel.scanner import scan
    from tersargs.kernel.schema import compile_schema

    configure_logging()

    try:
        schema = compile_schema(args.schema)
    except SchemaError as e:
        logger.error("schema_rejected", code=e.code.value, element=e.element)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_SCHEMA_ERROR)

    if args.command == "usage":
        print(schema.usage())
        sys.exit(EXIT_OK)

    if args.command == "check-schema":
        print(canonical_dumps(schema))
        sys.exit(EXIT_OK)

    if args.command == "parse":
        result = scan(schema, args.tokens)
        if not args.quiet:
            print(canonical_dumps({
                "valid": result.valid,
                "values": dict(result.values),
                "found": list(result.found),
                "unexpected": list(result.unexpected),
                "positionals": list(result.positionals),
                "errors": result.error_messages(),
            }))
        if not result.valid:
            print(f"Error: {result.error_message()}", file=sys.stderr)
            sys.exit(EXIT_INVALID_ARGUMENTS)
        sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
