"""Classify one raw argument as a short option, a long option or plain text."""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

# Whole-token match. Groups: (short, short_name, short_value, long, long_name, long_value).
# Compiled once at import; shared read-only by every parser.
_OPT_RE = re.compile(r"(-([a-zA-Z])(.+)?)|(--([a-zA-Z_-]+)=?(.+)?)")


class TokenKind(Enum):
    SHORT = "short"
    LONG = "long"
    TEXT = "text"


class Token(NamedTuple):
    kind: TokenKind
    raw: str
    name: str = ""
    value: str | None = None

    @property
    def is_option(self) -> bool:
        return self.kind is not TokenKind.TEXT


def classify(raw: str) -> Token:
    """Classify raw.

    -ofoo         -> SHORT, name 'o', value 'foo'
    --output=foo  -> LONG, name 'output', value 'foo'
    --output      -> LONG, name 'output', no value
    -, --, -1, x  -> TEXT
    """
    m = _OPT_RE.fullmatch(raw)
    if m is None:
        return Token(TokenKind.TEXT, raw)
    if m.group(1) is not None:
        return Token(TokenKind.SHORT, raw, m.group(2), m.group(3))
    return Token(TokenKind.LONG, raw, m.group(5), m.group(6))
