"""Pytest fixtures for optparser tests."""

from pathlib import Path

import pytest

from optparser import OptionKind, OptParser


@pytest.fixture
def ab_parser() -> OptParser:
    """-a/--long-a (value) and -b/--long-b (trigger), both optional."""
    parser = OptParser()
    parser.add_option("a", "long-a", OptionKind.VALUE, True, "option a")
    parser.add_option("b", "long-b", OptionKind.TRIGGER, True, "option b")
    return parser


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """YAML option schema with a mandatory value option, a defaulted one and a trigger."""
    path = tmp_path / "options.yaml"
    path.write_text(
        "options:\n"
        "  - short: o\n"
        "    long: output\n"
        "    help: output file\n"
        "  - short: n\n"
        "    long: count\n"
        "    optional: true\n"
        "    help: number of runs\n"
        "    default: 3\n"
        "  - short: v\n"
        "    long: verbose\n"
        "    kind: trigger\n"
        "    optional: true\n"
        "    help: verbose output\n"
    )
    return path
