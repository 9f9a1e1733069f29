"""Recolor bundled SVG icons and export them as PNG files."""

__version__ = "1.0.0"
