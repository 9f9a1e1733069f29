"""SVG to PNG rasterization through Qt's SVG renderer."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PySide6.QtCore import QByteArray, QRectF, Qt
from PySide6.QtGui import QGuiApplication, QImage, QPainter
from PySide6.QtSvg import QSvgRenderer

from duskicons.core.constants import OUTPUT_HEIGHT, OUTPUT_WIDTH
from duskicons.errors import ErrorCode, RasterizationError

logger = logging.getLogger(__name__)

_gui_app: QGuiApplication | None = None


def ensure_gui_application() -> None:
    """Make sure a Qt GUI application exists before painting.

    The command line runs without a window, so it falls back to the
    offscreen platform unless one was already chosen.
    """
    global _gui_app
    if QGuiApplication.instance() is not None:
        return
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    _gui_app = QGuiApplication(["duskicons"])


class SvgRasterizer:
    """Renders SVG documents into fixed-size, transparent PNG images."""

    def __init__(self, width: int = OUTPUT_WIDTH, height: int = OUTPUT_HEIGHT) -> None:
        self._width = width
        self._height = height

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        width: int | None = None,
        height: int | None = None,
    ) -> Path | None:
        """Rasterize ``input_path`` into ``output_path``.

        Returns the written path, or None when ``input_path`` does not exist.
        """
        source = Path(input_path)
        if not source.is_file():
            return None
        target = Path(output_path).resolve()
        svg = source.read_bytes()
        image = self._render(QByteArray(svg), width or self._width, height or self._height, source)
        self._save(image, target)
        logger.debug("rasterized %s -> %s", source, target)
        return target

    def render_markup(self, svg: str, width: int | None = None, height: int | None = None) -> QImage:
        """Render in-memory SVG markup into an image."""
        return self._render(QByteArray(svg.encode("utf-8")), width or self._width, height or self._height)

    def save_markup(self, svg: str, output_path: str | Path) -> Path:
        """Render SVG markup straight to a PNG file and return its path."""
        target = Path(output_path).resolve()
        self._save(self.render_markup(svg), target)
        return target

    def _render(self, data: QByteArray, width: int, height: int, source: Path | None = None) -> QImage:
        ensure_gui_application()
        renderer = QSvgRenderer(data)
        if not renderer.isValid():
            raise RasterizationError(ErrorCode.SVG_INVALID, path=source)

        image = QImage(width, height, QImage.Format.Format_ARGB32)
        image.fill(Qt.GlobalColor.transparent)

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            renderer.render(painter, _fit_rect(renderer, width, height))
        finally:
            painter.end()
        return image

    @staticmethod
    def _save(image: QImage, target: Path) -> None:
        if not image.save(str(target), "PNG"):
            raise RasterizationError(ErrorCode.PNG_WRITE_FAILED, path=target)


def _fit_rect(renderer: QSvgRenderer, width: int, height: int) -> QRectF:
    """Scale the document's view box into the target, keeping its aspect ratio."""
    view_box = renderer.viewBoxF()
    if view_box.width() <= 0 or view_box.height() <= 0:
        return QRectF(0, 0, width, height)
    scale = min(width / view_box.width(), height / view_box.height())
    target_w = view_box.width() * scale
    target_h = view_box.height() * scale
    return QRectF((width - target_w) / 2.0, (height - target_h) / 2.0, target_w, target_h)
