"""Scrollable grid of themed icon tiles."""

from __future__ import annotations

from PySide6.QtCore import QByteArray, Qt, Signal
from PySide6.QtSvgWidgets import QSvgWidget
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

_TILE_WIDTH = 200
_TILE_HEIGHT = 200
_PREVIEW_SIZE = 96
_COLUMNS = 4


class IconTile(QFrame):
    """Clickable tile: rendered icon above its name."""

    clicked = Signal(str)

    def __init__(self, name: str, svg: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("IconTile")
        self._name = name
        self._svg = svg
        self.setFixedSize(_TILE_WIDTH, _TILE_HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setAccessibleName(f"Icon {name}")
        self.setToolTip(f"Save {name}.png")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 20, 0, 20)
        layout.setSpacing(6)

        self._preview = QSvgWidget()
        self._preview.setFixedSize(_PREVIEW_SIZE, _PREVIEW_SIZE)
        self._preview.load(QByteArray(svg.encode("utf-8")))
        layout.addWidget(self._preview, 0, Qt.AlignmentFlag.AlignHCenter)

        label = QLabel(name)
        label.setObjectName("IconName")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

    @property
    def name(self) -> str:
        return self._name

    @property
    def svg(self) -> str:
        return self._svg

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._name)
        super().mousePressEvent(event)


class IconGrid(QScrollArea):
    """Lays out IconTile widgets in rows; shows a message when nothing matches."""

    icon_clicked = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("IconGrid")
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self._inner = QWidget()
        self._layout = QGridLayout(self._inner)
        self._layout.setContentsMargins(4, 4, 4, 4)
        self._layout.setSpacing(5)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter)
        self.setWidget(self._inner)

        self._tiles: list[IconTile] = []
        self._empty_label = QLabel("", self._inner)
        self._empty_label.setObjectName("EmptyStateLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setStyleSheet("color: #868e96; font-size: 14px; padding: 40px;")
        self._empty_label.setVisible(False)

    def set_icons(self, icons: list[tuple[str, str]], query: str = "") -> None:
        """Replace the grid contents with ``(name, themed svg)`` pairs."""
        self.clear()
        if not icons:
            self._empty_label.setText(f'No results found for "{query}"')
            self._layout.addWidget(self._empty_label, 0, 0, 1, _COLUMNS)
            self._empty_label.setVisible(True)
            return

        for index, (name, svg) in enumerate(icons):
            tile = IconTile(name, svg)
            tile.clicked.connect(self.icon_clicked.emit)
            self._tiles.append(tile)
            self._layout.addWidget(tile, index // _COLUMNS, index % _COLUMNS)

    def tile_names(self) -> list[str]:
        return [tile.name for tile in self._tiles]

    def empty_message(self) -> str:
        return "" if self._empty_label.isHidden() else self._empty_label.text()

    def clear(self) -> None:
        self._layout.removeWidget(self._empty_label)
        self._empty_label.setVisible(False)
        self._empty_label.setText("")
        for tile in self._tiles:
            self._layout.removeWidget(tile)
            tile.deleteLater()
        self._tiles = []
