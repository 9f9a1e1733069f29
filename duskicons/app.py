"""Logging setup and QApplication bootstrap for the preview window."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from duskicons.config.settings import AppSettings
from duskicons.core.palette import DEFAULT_TOKEN_MAP, ColorTokenMap
from duskicons.runtime_paths import icon_library_root, is_frozen, package_root


def configure_logger(log_dir: Path) -> logging.Logger:
    """Attach the rotating log file (and a stderr handler for errors) once."""
    logger = logging.getLogger("duskicons")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "duskicons.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.ERROR)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)
    logger.propagate = False
    return logger


def run_preview(settings: AppSettings | None = None,
                token_map: ColorTokenMap = DEFAULT_TOKEN_MAP) -> int:
    """Initialize and run the icon preview window."""
    from PySide6.QtWidgets import QApplication

    from duskicons.core.library import IconLibrary
    from duskicons.ui.preview_window import PreviewWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("duskicons")
    app.setOrganizationName("duskicons")
    settings = settings or AppSettings()
    logger = configure_logger(settings.log_dir)
    logger.info("preview mode frozen=%s package_root=%s", is_frozen(), package_root())

    library_root = icon_library_root()
    if not library_root.exists():
        logger.warning("icon library missing at %s", library_root)

    window = PreviewWindow(settings, IconLibrary(library_root), token_map=token_map)
    window.show()

    exit_code = app.exec()
    return exit_code
