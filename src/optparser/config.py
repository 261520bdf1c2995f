"""Option schemas declared in YAML.

Schema format:
- options: list of entries, in registration (and help) order
  - short: single letter (optional)
  - long: long name (optional; one of short/long is required)
  - kind: value | trigger (default: value)
  - optional: bool (default: false)
  - help: text (default: "")
  - default: value; non-strings are rendered with str_from (default: "")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from optparser.errors import InvalidOptionError
from optparser.options import OptionKind
from optparser.registry import OptionRegistry

DEFAULT_OPTION_FIELDS: dict[str, Any] = {
    "short": "",
    "long": "",
    "kind": "value",
    "optional": False,
    "help": "",
    "default": "",
}


def resolve_option_fields(entry: dict[str, Any]) -> dict[str, Any]:
    """Return entry with defaults filled. Unknown keys raise InvalidOptionError."""
    unknown = sorted(set(entry) - set(DEFAULT_OPTION_FIELDS))
    if unknown:
        msg = f"unknown option field(s): {', '.join(unknown)}"
        raise InvalidOptionError(msg)
    out = dict(DEFAULT_OPTION_FIELDS)
    out.update({k: v for k, v in entry.items() if v is not None})
    return out


def _optional(value: Any, entry: dict[str, Any]) -> bool:
    if not isinstance(value, bool):
        msg = f"'optional' must be true or false, got {value!r} in {entry!r}"
        raise InvalidOptionError(msg)
    return value


def _kind(value: Any) -> OptionKind:
    try:
        return OptionKind(str(value).lower())
    except ValueError:
        msg = f"invalid option kind '{value}' (expected value or trigger)"
        raise InvalidOptionError(msg) from None


def options_from_config(data: dict[str, Any] | None) -> OptionRegistry:
    """Build a registry from a loaded schema mapping."""
    registry = OptionRegistry()
    entries = (data or {}).get("options") or []
    if not isinstance(entries, list):
        msg = "'options' must be a list"
        raise InvalidOptionError(msg)
    for entry in entries:
        if not isinstance(entry, dict):
            msg = f"option entry must be a mapping, got {entry!r}"
            raise InvalidOptionError(msg)
        fields = resolve_option_fields(entry)
        registry.register(
            str(fields["short"]),
            str(fields["long"]),
            _kind(fields["kind"]),
            optional=_optional(fields["optional"], entry),
            help=str(fields["help"]),
            default=fields["default"],
        )
    return registry


def load_option_schema(config_path: Path) -> OptionRegistry:
    """Load a YAML option schema into a new registry."""
    with Path(config_path).open() as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        msg = f"option schema must be a mapping: {config_path}"
        raise InvalidOptionError(msg)
    return options_from_config(data)
