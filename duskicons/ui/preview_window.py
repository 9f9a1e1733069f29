"""Preview window: search, pick colors, click an icon to save it as PNG."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from duskicons.config.settings import AppSettings
from duskicons.core.constants import PNG_EXTENSION
from duskicons.core.converter import expand_home
from duskicons.core.library import IconLibrary
from duskicons.core.palette import DEFAULT_TOKEN_MAP, ColorTokenMap, Theme, is_hex_color, recolor_svg
from duskicons.core.rasterizer import SvgRasterizer
from duskicons.errors import DuskIconsError, format_error_for_user
from duskicons.ui.widgets.icon_grid import IconGrid

logger = logging.getLogger(__name__)


class PreviewWindow(QMainWindow):
    """Shows every library icon in the current theme."""

    def __init__(
        self,
        settings: AppSettings,
        library: IconLibrary,
        token_map: ColorTokenMap = DEFAULT_TOKEN_MAP,
        rasterizer: SvgRasterizer | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("duskicons")
        self.resize(900, 640)
        self._settings = settings
        self._library = library
        self._token_map = token_map
        self._rasterizer = rasterizer or SvgRasterizer()
        self._sources: dict[str, str] = {
            name: self._library.read(name).svg for name in self._library.list_icons()
        }
        self._theme = Theme(
            background=settings.background,
            foreground_primary=settings.foreground_primary,
            foreground_secondary=settings.foreground_secondary,
        )

        central = QWidget()
        layout = QVBoxLayout(central)

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search icons...")
        self._search.setClearButtonEnabled(True)
        layout.addWidget(self._search)

        colors = QHBoxLayout()
        form = QFormLayout()
        self._fg_edit = QLineEdit(self._theme.foreground_primary)
        self._fg2_edit = QLineEdit(self._theme.foreground_secondary)
        self._bg_edit = QLineEdit(self._theme.background)
        form.addRow("Primary foreground color:", self._fg_edit)
        form.addRow("Secondary foreground color:", self._fg2_edit)
        form.addRow("Background color:", self._bg_edit)
        colors.addLayout(form)
        colors.addStretch(1)
        layout.addLayout(colors)

        self._grid = IconGrid()
        layout.addWidget(self._grid, 1)
        self.setCentralWidget(central)

        self._search.textChanged.connect(self.refresh)
        for edit in (self._fg_edit, self._fg2_edit, self._bg_edit):
            edit.textChanged.connect(self._on_color_changed)
        self._grid.icon_clicked.connect(self._on_icon_clicked)

        self.refresh()

    @property
    def grid(self) -> IconGrid:
        return self._grid

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_query(self, query: str) -> None:
        self._search.setText(query)

    def set_colors(self, foreground_primary: str, foreground_secondary: str, background: str) -> None:
        self._fg_edit.setText(foreground_primary)
        self._fg2_edit.setText(foreground_secondary)
        self._bg_edit.setText(background)

    def visible_icons(self) -> list[str]:
        query = self._search.text().strip().lower()
        return [name for name in self._sources if query in name.lower()]

    def themed_svg(self, name: str) -> str:
        return recolor_svg(self._sources[name], self._theme, self._token_map)

    def refresh(self) -> None:
        icons = [(name, self.themed_svg(name)) for name in self.visible_icons()]
        self._grid.set_icons(icons, query=self._search.text())

    def export_icon(self, name: str, output_path: str | Path) -> Path:
        """Write ``name`` in the current theme to ``output_path`` as PNG."""
        written = self._rasterizer.save_markup(self.themed_svg(name), output_path)
        logger.info("exported %s from preview to %s", name, written)
        return written

    def _on_color_changed(self, _text: str) -> None:
        values = (self._bg_edit.text().strip(), self._fg_edit.text().strip(), self._fg2_edit.text().strip())
        if not all(is_hex_color(value) for value in values):
            return
        self._theme = Theme(*values)
        self._settings.background, self._settings.foreground_primary, self._settings.foreground_secondary = values
        self.refresh()

    def _on_icon_clicked(self, name: str) -> None:
        start_dir = Path(expand_home(self._settings.output_dir))
        path, _ = QFileDialog.getSaveFileName(
            self,
            f"Save {name}",
            str(start_dir / f"{name}{PNG_EXTENSION}"),
            "PNG images (*.png)",
        )
        if not path:
            return
        try:
            written = self.export_icon(name, path)
        except DuskIconsError as exc:
            logger.error("preview export of %s failed: %s", name, exc)
            QMessageBox.warning(self, "Export failed", format_error_for_user(exc))
            return
        self._settings.output_dir = str(written.parent)
        self.statusBar().showMessage(f"Saved {written}", 5000)
