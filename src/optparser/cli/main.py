"""Main CLI entry point for optparser."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import yaml

from optparser.errors import OptParserError
from optparser.options import OptionKind, option_name
from optparser.parser import OptParser

USAGE = "Usage: optparser <command> [args...]"


def _usage() -> None:
    print(USAGE, file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print("  print                      - Print help for the demo options -a and -b", file=sys.stderr)
    print("  help <schema.yaml>         - Print help for the options in a YAML schema", file=sys.stderr)
    print(
        "  parse <schema.yaml> [args] - Parse args against a YAML schema and print the results",
        file=sys.stderr,
    )


def demo_parser() -> OptParser:
    """The two options of the print demo: -a/--long-a (value) and -b/--long-b (trigger)."""
    parser = OptParser()
    parser.add_option("a", "long-a", OptionKind.VALUE, False, "option a")
    parser.add_option("b", "long-b", OptionKind.TRIGGER, False, "option b")
    return parser


def _load(schema: str) -> OptParser:
    try:
        return OptParser.from_config(Path(schema))
    except (OSError, yaml.YAMLError, OptParserError) as e:
        print(f"Error: cannot load option schema {schema}: {e}", file=sys.stderr)
        sys.exit(1)


def run_print() -> int:
    print(demo_parser())
    return 0


def run_help_argv(argv: list[str]) -> int:
    if len(argv) != 1:
        print("Usage: optparser help <schema.yaml>", file=sys.stderr)
        return 1
    print(_load(argv[0]), end="")
    return 0


def run_parse_argv(argv: list[str]) -> int:
    """Parse argv[1:] against the schema at argv[0]; print one line per option, then positionals."""
    if not argv:
        print("Usage: optparser parse <schema.yaml> [args...]", file=sys.stderr)
        return 1
    parser = _load(argv[0])
    if not parser.parse(argv[1:]):
        print(f"Usage: optparser parse {argv[0]} <options> [args...]", file=sys.stderr)
        print(parser, end="", file=sys.stderr)
        return 1
    for opt in parser.registry:
        name = opt.short_name or opt.long_name
        print(
            f"{option_name(opt)} present={parser.got_option(name)} "
            f"value={parser.option_value(name)}"
        )
    for arg in parser.args:
        print(f"arg: {arg}")
    return 0


def main() -> None:
    """Main CLI entry point."""
    logging.basicConfig(format="warning: %(message)s", level=logging.WARNING)
    if len(sys.argv) < 2:
        _usage()
        sys.exit(1)

    command = sys.argv[1]
    rest = sys.argv[2:]
    if command == "print":
        rc = run_print()
    elif command == "help":
        rc = run_help_argv(rest)
    elif command == "parse":
        rc = run_parse_argv(rest)
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        _usage()
        rc = 1
    sys.exit(rc)


if __name__ == "__main__":
    main()
