"""Load a color token map from a YAML file.

The file holds a single ``tokens`` list, in replacement order::

    tokens:
      - placeholder: "#1e1e1e"
        theme_field: background
      - placeholder: "#fff"
        theme_field: foreground_primary
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from duskicons.core.palette import ColorToken, ColorTokenMap
from duskicons.errors import ErrorCode, ThemeValidationError

_MAX_TOKENS_BYTES = 32 * 1024
_TOKEN_KEYS = {"placeholder", "theme_field"}


def load_token_map(path: str | Path) -> ColorTokenMap:
    """Parse and validate a token map file."""
    path = Path(path)
    data = _load_yaml(path)
    _reject_unknown_keys(data, allowed={"tokens"}, context=str(path))

    raw_tokens = data.get("tokens")
    if not isinstance(raw_tokens, list) or not raw_tokens:
        raise _invalid(f"{path}: 'tokens' must be a non-empty list", path)

    tokens: list[ColorToken] = []
    for index, entry in enumerate(raw_tokens):
        context = f"{path}: tokens[{index}]"
        if not isinstance(entry, Mapping):
            raise _invalid(f"{context} must be a mapping", path)
        _reject_unknown_keys(entry, allowed=_TOKEN_KEYS, context=context)
        placeholder = _required_str(entry, "placeholder", context, path)
        theme_field = _required_str(entry, "theme_field", context, path)
        tokens.append(ColorToken(placeholder=placeholder, theme_field=theme_field))

    try:
        return ColorTokenMap(tuple(tokens))
    except ThemeValidationError as exc:
        raise _invalid(f"{path}: {exc.message}", path) from exc


def _load_yaml(path: Path) -> Mapping[str, object]:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise _invalid(f"Unable to stat {path}: {exc}", path) from exc
    if size > _MAX_TOKENS_BYTES:
        raise _invalid(f"{path}: file exceeds max size ({_MAX_TOKENS_BYTES} bytes)", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise _invalid(f"Unable to read {path}: {exc}", path) from exc
    except yaml.YAMLError as exc:
        raise _invalid(f"Invalid YAML in {path}: {exc}", path) from exc
    if not isinstance(data, dict):
        raise _invalid(f"Expected a mapping in {path}", path)
    return data


def _required_str(data: Mapping[str, object], key: str, context: str, path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise _invalid(f"{context}: field {key!r} must be a non-empty string", path)
    return value.strip()


def _reject_unknown_keys(data: Mapping[str, object], *, allowed: set[str], context: str) -> None:
    unknown = sorted(str(key) for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise _invalid(f"{context}: unsupported keys found: {joined}", None)


def _invalid(message: str, path: Path | None) -> ThemeValidationError:
    return ThemeValidationError(message, code=ErrorCode.TOKEN_MAP_INVALID, path=path)
