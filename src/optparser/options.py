"""Option descriptors: kind, names, optionality, default, help; name forms for messages."""

from __future__ import annotations

from enum import Enum

from optparser.errors import InvalidOptionError


class OptionKind(Enum):
    VALUE = "value"
    TRIGGER = "trigger"


class OptionSpec:
    """One registered option. At least one of short_name/long_name is non-empty."""

    def __init__(
        self,
        short_name: str,
        long_name: str,
        kind: OptionKind,
        optional: bool = False,
        help: str = "",
        default: str = "",
    ):
        if not short_name and not long_name:
            msg = "option needs a short or a long name"
            raise InvalidOptionError(msg)
        if len(short_name) > 1:
            msg = f"short option name must be a single character, got '{short_name}'"
            raise InvalidOptionError(msg)
        if not isinstance(kind, OptionKind):
            msg = f"invalid option kind {kind!r} for {conflict_name(short_name, long_name)}"
            raise InvalidOptionError(msg)
        self.short_name = short_name
        self.long_name = long_name
        self.kind = kind
        self.optional = optional
        self.help = help
        self.default = default

    @property
    def takes_value(self) -> bool:
        return self.kind is OptionKind.VALUE

    def collides_with(self, other: OptionSpec) -> bool:
        """True when both share a non-empty short name or a non-empty long name."""
        if self.short_name and self.short_name == other.short_name:
            return True
        return bool(self.long_name) and self.long_name == other.long_name

    def __repr__(self) -> str:
        return (
            f"OptionSpec({self.short_name!r}, {self.long_name!r}, {self.kind}, "
            f"optional={self.optional!r}, default={self.default!r})"
        )


def conflict_name(short_name: str, long_name: str) -> str:
    """Name form used in duplicate errors: -s/--long, -s or --long."""
    parts = []
    if short_name:
        parts.append(f"-{short_name}")
    if long_name:
        parts.append(f"--{long_name}")
    return "/".join(parts)


def option_name(spec: OptionSpec) -> str:
    """Name form used in warnings and help: value options with a long name end in '='."""
    res = conflict_name(spec.short_name, spec.long_name)
    if spec.long_name and spec.takes_value:
        res += "="
    return res
