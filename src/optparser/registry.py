"""Option registry: ordered option descriptors, name uniqueness, lookup, help rendering."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from optparser.convert import str_from
from optparser.errors import DuplicateOptionError, RegistryFrozenError
from optparser.options import OptionKind, OptionSpec, conflict_name, option_name

# Width of the right-aligned name column in help output.
NAME_WIDTH = 20


class OptionRegistry:
    """Registered options in insertion order (also the help order)."""

    def __init__(self) -> None:
        self._options: list[OptionSpec] = []
        self._frozen = False

    def register(
        self,
        short_name: str,
        long_name: str,
        kind: OptionKind,
        optional: bool = False,
        help: str = "",
        default: Any = "",
    ) -> OptionSpec:
        """Append an option. Raises DuplicateOptionError naming the option already holding the name."""
        if self._frozen:
            msg = f"cannot register {conflict_name(short_name, long_name)} after parsing"
            raise RegistryFrozenError(msg)
        spec = OptionSpec(short_name, long_name, kind, optional, help, str_from(default))
        for existing in self._options:
            if spec.collides_with(existing):
                raise DuplicateOptionError(conflict_name(existing.short_name, existing.long_name))
        self._options.append(spec)
        return spec

    def freeze(self) -> None:
        self._frozen = True

    def lookup(self, name: str) -> int | None:
        """Index of the option whose short or long name equals name, or None."""
        for i, opt in enumerate(self._options):
            if opt.short_name == name or opt.long_name == name:
                return i
        return None

    def lookup_short(self, name: str) -> int | None:
        for i, opt in enumerate(self._options):
            if opt.short_name == name:
                return i
        return None

    def lookup_long(self, name: str) -> int | None:
        for i, opt in enumerate(self._options):
            if opt.long_name == name:
                return i
        return None

    def render(self, stream: TextIO | None = None) -> None:
        """Write one help line per option: '<name-form>: <help> (default: <default>)'."""
        out = stream if stream is not None else sys.stdout
        for opt in self._options:
            line = f"{option_name(opt):>{NAME_WIDTH}}: {opt.help}"
            if opt.default:
                line += f" (default: {opt.default})"
            out.write(line + "\n")

    def __getitem__(self, index: int) -> OptionSpec:
        return self._options[index]

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)
