"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from duskicons.core.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND_PRIMARY,
    DEFAULT_FOREGROUND_SECONDARY,
    DEFAULT_OUTPUT_DIR,
)
from duskicons.core.palette import is_hex_color


class AppSettings:
    """Wraps QSettings for the answers remembered between runs."""

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            self._qs = QSettings("duskicons", "duskicons")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    # -- output --

    @property
    def output_dir(self) -> str:
        raw = self._qs.value("output/dir", DEFAULT_OUTPUT_DIR, type=str)
        return (raw or "").strip() or DEFAULT_OUTPUT_DIR

    @output_dir.setter
    def output_dir(self, value: str) -> None:
        self._qs.setValue("output/dir", (value or "").strip() or DEFAULT_OUTPUT_DIR)

    # -- colors --

    @property
    def foreground_primary(self) -> str:
        return self._color("colors/foreground_primary", DEFAULT_FOREGROUND_PRIMARY)

    @foreground_primary.setter
    def foreground_primary(self, value: str) -> None:
        self._set_color("colors/foreground_primary", value)

    @property
    def foreground_secondary(self) -> str:
        return self._color("colors/foreground_secondary", DEFAULT_FOREGROUND_SECONDARY)

    @foreground_secondary.setter
    def foreground_secondary(self, value: str) -> None:
        self._set_color("colors/foreground_secondary", value)

    @property
    def background(self) -> str:
        return self._color("colors/background", DEFAULT_BACKGROUND)

    @background.setter
    def background(self, value: str) -> None:
        self._set_color("colors/background", value)

    # -- token map --

    @property
    def tokens_file(self) -> str:
        return self._qs.value("tokens/file", "", type=str)

    @tokens_file.setter
    def tokens_file(self, value: str) -> None:
        self._qs.setValue("tokens/file", value)

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    def _color(self, key: str, default: str) -> str:
        raw = self._qs.value(key, default, type=str)
        value = (raw or "").strip()
        return value if is_hex_color(value) else default

    def _set_color(self, key: str, value: str) -> None:
        if is_hex_color(value):
            self._qs.setValue(key, value)

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "duskicons"
