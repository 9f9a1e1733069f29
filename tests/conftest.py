"""Shared fixtures: an offscreen QApplication and throwaway app data."""

from __future__ import annotations

import logging
import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from duskicons.config.settings import AppSettings
from duskicons.core.library import IconLibrary

HOME_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64" width="64" height="64">'
    '<rect width="64" height="64" style="background:#1e1e1e" fill="#1e1e1e"/>'
    '<path d="M32 14 12 31h6v19h28V31h6z" fill="#fff"/>'
    '<rect x="29" y="39" width="6" height="11" fill="#efefef"/>'
    "</svg>"
)


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication(["duskicons-tests"])
    yield app


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path: Path, monkeypatch) -> Path:
    app_data = tmp_path / "appdata"
    monkeypatch.setenv("APPDATA", str(app_data))
    return app_data


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(tmp_path / "settings.ini")


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    root = tmp_path / "svg"
    root.mkdir()
    for name in ("home", "star", "mail", "bell"):
        (root / f"{name}.svg").write_text(HOME_SVG, encoding="utf-8")
    return root


@pytest.fixture
def library(icon_dir: Path) -> IconLibrary:
    return IconLibrary(icon_dir)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("duskicons")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
