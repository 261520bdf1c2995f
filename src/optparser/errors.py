"""Fatal errors: registry misconfiguration, queries before parsing, strict conversion failures.

Recoverable input problems (unknown option, missing value, missing mandatory
option) are never raised; the parser logs and records them instead.
"""

from __future__ import annotations


class OptParserError(Exception):
    """Base class for programmer/configuration errors raised by optparser."""


class InvalidOptionError(OptParserError, ValueError):
    """Option descriptor is malformed (no name, short name too long, unknown kind)."""


class DuplicateOptionError(OptParserError, ValueError):
    """An option with the same short or long name is already registered."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"duplicate option {option}")


class RegistryFrozenError(OptParserError, RuntimeError):
    """Options were registered after the parser already ran."""


class NotParsedError(OptParserError, RuntimeError):
    """Results were queried before any parse."""

    def __init__(self) -> None:
        super().__init__("options not parsed")


class UnknownOptionNameError(OptParserError, LookupError):
    """Results were queried for a name no option is registered under."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no option with name '{name}'")


class ConversionError(OptParserError, ValueError):
    """Strict conversion of a stored string to a target type failed."""
