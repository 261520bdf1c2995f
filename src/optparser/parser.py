"""Option parser: one pass over argv binding options, values and positional arguments.

Input problems (unknown option, missing value, missing mandatory option) never
stop the pass. Each one is logged as a warning and recorded in
OptParser.warnings, and parse() returns False once any occurred.
Wiring mistakes (duplicate names, querying before parse, unknown names) raise.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, NamedTuple, TextIO

from optparser.classifier import TokenKind, classify
from optparser.convert import check_converter, str_to
from optparser.errors import NotParsedError, UnknownOptionNameError
from optparser.options import OptionKind, OptionSpec, option_name
from optparser.registry import OptionRegistry

log = logging.getLogger(__name__)


class WarningKind(Enum):
    UNKNOWN_OPTION = "unknown_option"
    MISSING_VALUE = "missing_value"
    MISSING_MANDATORY = "missing_mandatory"


class ParseWarning(NamedTuple):
    kind: WarningKind
    option: str
    message: str


class OptionResult:
    """Outcome of the last parse for one option."""

    def __init__(self, value: str, present: bool = False):
        self.value = value
        self.present = present

    def __repr__(self) -> str:
        return f"OptionResult(value={self.value!r}, present={self.present!r})"


class OptParser:
    """Registered options plus the results of the most recent parse."""

    def __init__(self, registry: OptionRegistry | None = None):
        self.registry = registry if registry is not None else OptionRegistry()
        self._results: list[OptionResult] = []
        self._args: list[str] = []
        self.warnings: list[ParseWarning] = []
        self._parsed = False
        self._converters: dict[type, Callable[[str], Any]] = {}

    @classmethod
    def from_config(cls, config_path: Path) -> OptParser:
        """Build a parser from a YAML option schema (see optparser.config)."""
        from optparser.config import load_option_schema

        return cls(load_option_schema(config_path))

    def add_option(
        self,
        short_name: str,
        long_name: str,
        kind: OptionKind,
        optional: bool = False,
        help: str = "",
        default: Any = "",
    ) -> OptionSpec:
        return self.registry.register(short_name, long_name, kind, optional, help, default)

    def register_converter(self, target: type, func: Callable[[str], Any]) -> None:
        """Convert option values to target with func in option_value(). func raises ValueError on bad input."""
        check_converter(target)
        self._converters[target] = func

    # --- Parse ---

    def _warn(self, kind: WarningKind, option: str, message: str) -> None:
        log.warning("%s", message)
        self.warnings.append(ParseWarning(kind, option, message))

    def _resolve(self, kind: TokenKind, name: str) -> int | None:
        if kind is TokenKind.SHORT:
            return self.registry.lookup_short(name)
        return self.registry.lookup_long(name)

    def parse(self, tokens: Iterable[str]) -> bool:
        """Parse tokens (argv without the program name). True when no warning was emitted."""
        self.registry.freeze()
        self._parsed = True
        self._results = [OptionResult(opt.default) for opt in self.registry]
        self._args = []
        self.warnings = []
        expecting: int | None = None
        ok = True

        for raw in tokens:
            tok = classify(raw)
            if tok.is_option:
                if expecting is not None:
                    name = option_name(self.registry[expecting])
                    self._warn(
                        WarningKind.MISSING_VALUE,
                        name,
                        f"expected value for option {name}, got option '{raw}' instead",
                    )
                    expecting = None
                    ok = False
                i = self._resolve(tok.kind, tok.name)
                if i is None:
                    self._warn(WarningKind.UNKNOWN_OPTION, raw, f"unknown option '{raw}'")
                    ok = False
                    continue
                self._results[i].present = True
                if self.registry[i].takes_value:
                    if tok.value is not None:
                        self._results[i].value = tok.value
                    else:
                        expecting = i
            elif expecting is not None:
                self._results[expecting].value = raw
                expecting = None
            else:
                self._args.append(raw)

        if expecting is not None:
            name = option_name(self.registry[expecting])
            self._warn(WarningKind.MISSING_VALUE, name, f"expected value for option {name}")
            ok = False
        for opt, res in zip(self.registry, self._results):
            if not opt.optional and not res.present:
                name = option_name(opt)
                self._warn(
                    WarningKind.MISSING_MANDATORY, name, f"mandatory option {name} is missing"
                )
                ok = False
        return ok

    def parse_argv(self, argv: Sequence[str]) -> bool:
        """Parse a full argv; argv[0] is the program name and is skipped."""
        return self.parse(argv[1:])

    # --- Results ---

    def _result(self, name: str) -> OptionResult:
        if not self._parsed:
            raise NotParsedError
        i = self.registry.lookup(name)
        if i is None:
            raise UnknownOptionNameError(name)
        return self._results[i]

    def got_option(self, name: str) -> bool:
        """Whether the option (short or long name) was seen in the last parse."""
        return self._result(name).present

    def option_value(self, name: str, target: type = str, strict: bool = False) -> Any:
        """Parsed value, or the default, converted with optparser.convert.str_to."""
        return str_to(
            self._result(name).value, target, strict=strict, converters=self._converters
        )

    @property
    def args(self) -> list[str]:
        return list(self._args)

    def positional_arguments(self) -> list[str]:
        return self.args

    # --- Help ---

    def render(self, stream: TextIO | None = None) -> None:
        self.registry.render(stream)

    def __str__(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()
