"""Icon pipeline constants."""

from __future__ import annotations

OUTPUT_WIDTH = 512
OUTPUT_HEIGHT = 512

SVG_EXTENSION = ".svg"
PNG_EXTENSION = ".png"
TMP_SUFFIX = "-tmp.svg"

ALL_ICONS = "all"

THEME_FIELDS: tuple[str, ...] = (
    "background",
    "foreground_primary",
    "foreground_secondary",
)

# (placeholder, theme field) pairs found in every bundled source icon.
DEFAULT_TOKEN_PAIRS: tuple[tuple[str, str], ...] = (
    ("#1e1e1e", "background"),
    ("#fff", "foreground_primary"),
    ("#efefef", "foreground_secondary"),
)

DEFAULT_OUTPUT_DIR = "."
DEFAULT_FOREGROUND_PRIMARY = "#ffffff"
DEFAULT_FOREGROUND_SECONDARY = "#efefef"
DEFAULT_BACKGROUND = "#1e1e1e"
