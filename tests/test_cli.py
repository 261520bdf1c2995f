"""Tests for optparser.cli.main (optparser print | help | parse)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from optparser.cli.main import demo_parser, main, run_help_argv, run_parse_argv


def _run_main(argv: list[str]) -> int:
    with patch("sys.argv", ["optparser", *argv]), pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestMain:
    def test_no_command_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_main([]) == 1
        assert "Usage: optparser <command>" in capsys.readouterr().err

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().err

    def test_print_shows_demo_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_main(["print"]) == 0
        out = capsys.readouterr().out
        assert "-a/--long-a=: option a" in out
        assert "-b/--long-b: option b" in out

    def test_parse_dispatch(self, schema_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_main(["parse", str(schema_file), "-ofile"]) == 0
        assert "-o/--output= present=True value=file" in capsys.readouterr().out


class TestDemoParser:
    def test_both_options_mandatory(self) -> None:
        parser = demo_parser()
        assert parser.parse(["-afoo", "-b"]) is True
        assert parser.parse(["-afoo"]) is False


class TestRunHelp:
    def test_prints_schema_help(self, schema_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_help_argv([str(schema_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[1].endswith("-n/--count=: number of runs (default: 3)")

    def test_requires_one_schema(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_help_argv([]) == 1
        assert "Usage: optparser help" in capsys.readouterr().err

    def test_missing_schema_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_help_argv([str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1
        assert "cannot load option schema" in capsys.readouterr().err


class TestRunParse:
    def test_prints_results_and_positionals(
        self, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_parse_argv([str(schema_file), "--output=o.txt", "in1", "-v", "in2"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "-o/--output= present=True value=o.txt",
            "-n/--count= present=False value=3",
            "-v/--verbose present=True value=",
            "arg: in1",
            "arg: in2",
        ]

    def test_failed_parse_prints_usage(
        self, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_parse_argv([str(schema_file), "-v"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Usage: optparser parse" in captured.err
        assert "-o/--output=: output file" in captured.err

    def test_requires_schema(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_parse_argv([]) == 1
        assert "Usage: optparser parse" in capsys.readouterr().err

    def test_invalid_schema_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("options:\n  - short: a\n  - short: a\n")
        with pytest.raises(SystemExit) as exc_info:
            run_parse_argv([str(path)])
        assert exc_info.value.code == 1
        assert "duplicate option -a" in capsys.readouterr().err
