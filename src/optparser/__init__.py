"""optparser: short/long command-line options, value binding, mandatory checks, positional arguments."""

from .classifier import Token, TokenKind, classify
from .config import load_option_schema, options_from_config
from .convert import str_from, str_to
from .errors import (
    ConversionError,
    DuplicateOptionError,
    InvalidOptionError,
    NotParsedError,
    OptParserError,
    RegistryFrozenError,
    UnknownOptionNameError,
)
from .options import OptionKind, OptionSpec, option_name
from .parser import OptionResult, OptParser, ParseWarning, WarningKind
from .registry import OptionRegistry

__all__ = [
    "ConversionError",
    "DuplicateOptionError",
    "InvalidOptionError",
    "NotParsedError",
    "OptParser",
    "OptParserError",
    "OptionKind",
    "OptionRegistry",
    "OptionResult",
    "OptionSpec",
    "ParseWarning",
    "RegistryFrozenError",
    "Token",
    "TokenKind",
    "UnknownOptionNameError",
    "WarningKind",
    "classify",
    "load_option_schema",
    "option_name",
    "options_from_config",
    "str_from",
    "str_to",
]
