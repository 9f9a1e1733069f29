"""Theme colors and placeholder color substitution for SVG markup.

Every bundled icon is drawn with three placeholder colors. A
:class:`ColorTokenMap` pairs each placeholder with a :class:`Theme` field and
:func:`recolor_svg` swaps them in one regex pass, so a theme color that
happens to equal another placeholder is never substituted twice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from duskicons.core.constants import DEFAULT_TOKEN_PAIRS, THEME_FIELDS
from duskicons.errors import ErrorCode, ThemeValidationError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9A-F]{3}|[0-9A-F]{6})$", re.IGNORECASE)


def is_hex_color(value: object) -> bool:
    """Return True for ``#RGB`` or ``#RRGGBB`` in any letter case."""
    return isinstance(value, str) and _HEX_COLOR_RE.match(value) is not None


@dataclass(frozen=True, slots=True)
class Theme:
    """The three caller-chosen colors applied to an icon."""

    background: str
    foreground_primary: str
    foreground_secondary: str

    def __post_init__(self) -> None:
        for name in THEME_FIELDS:
            value = getattr(self, name)
            if not is_hex_color(value):
                raise ThemeValidationError(f"Invalid hex color for {name}: {value!r}")

    def color_for(self, field_name: str) -> str:
        if field_name not in THEME_FIELDS:
            raise KeyError(field_name)
        return getattr(self, field_name)


@dataclass(frozen=True, slots=True)
class ColorToken:
    """A placeholder color and the theme field that replaces it."""

    placeholder: str
    theme_field: str


@dataclass(frozen=True, slots=True)
class ColorTokenMap:
    """Ordered, closed set of placeholder colors rewritten by :func:`recolor_svg`."""

    tokens: tuple[ColorToken, ...]

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ThemeValidationError(
                "Color token map must contain at least one token",
                code=ErrorCode.TOKEN_MAP_INVALID,
            )
        seen: set[str] = set()
        for token in self.tokens:
            if not is_hex_color(token.placeholder):
                raise ThemeValidationError(
                    f"Placeholder {token.placeholder!r} is not a hex color",
                    code=ErrorCode.TOKEN_MAP_INVALID,
                )
            if token.theme_field not in THEME_FIELDS:
                raise ThemeValidationError(
                    f"Unknown theme field {token.theme_field!r} for {token.placeholder}",
                    code=ErrorCode.TOKEN_MAP_INVALID,
                )
            key = token.placeholder.lower()
            if key in seen:
                raise ThemeValidationError(
                    f"Duplicate placeholder {token.placeholder!r}",
                    code=ErrorCode.TOKEN_MAP_INVALID,
                )
            seen.add(key)

    @classmethod
    def from_pairs(cls, pairs) -> ColorTokenMap:
        return cls(tuple(ColorToken(placeholder, field_name) for placeholder, field_name in pairs))

    def placeholders(self) -> tuple[str, ...]:
        return tuple(token.placeholder.lower() for token in self.tokens)

    def field_for(self, placeholder: str) -> str:
        key = placeholder.lower()
        for token in self.tokens:
            if token.placeholder.lower() == key:
                return token.theme_field
        raise KeyError(placeholder)


DEFAULT_TOKEN_MAP = ColorTokenMap.from_pairs(DEFAULT_TOKEN_PAIRS)


@lru_cache(maxsize=16)
def _placeholder_pattern(placeholders: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first; a trailing hex digit means a different, longer color.
    ordered = sorted(placeholders, key=len, reverse=True)
    alternation = "|".join(re.escape(value) for value in ordered)
    return re.compile(f"(?:{alternation})(?![0-9A-F])", re.IGNORECASE)


def recolor_svg(svg: str, theme: Theme, token_map: ColorTokenMap = DEFAULT_TOKEN_MAP) -> str:
    """Return ``svg`` with every placeholder color replaced by its theme color.

    Placeholders match case-insensitively and are replaced with the theme
    value exactly as given. Markup without placeholders comes back unchanged.
    """
    replacements = {
        token.placeholder.lower(): theme.color_for(token.theme_field)
        for token in token_map.tokens
    }
    pattern = _placeholder_pattern(token_map.placeholders())
    return pattern.sub(lambda match: replacements[match.group(0).lower()], svg)
