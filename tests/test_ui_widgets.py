"""Tests for duskicons.ui widgets and the preview window."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage
from PySide6.QtTest import QTest

from duskicons.core.palette import Theme
from duskicons.ui.preview_window import PreviewWindow
from duskicons.ui.widgets.icon_grid import IconGrid, IconTile

from conftest import HOME_SVG


class TestIconGrid:
    """Tests for IconGrid and IconTile."""

    def test_set_icons_creates_tiles(self):
        """Test set_icons builds one tile per icon."""
        grid = IconGrid()
        grid.set_icons([("home", HOME_SVG), ("star", HOME_SVG)])
        assert grid.tile_names() == ["home", "star"]
        assert grid.empty_message() == ""

    def test_empty_shows_query(self):
        """Test an empty result shows the query in the message."""
        grid = IconGrid()
        grid.set_icons([], query="rocket")
        assert grid.tile_names() == []
        assert grid.empty_message() == 'No results found for "rocket"'

    def test_refill_clears_empty_state(self):
        """Test new results hide the empty message."""
        grid = IconGrid()
        grid.set_icons([], query="x")
        grid.set_icons([("home", HOME_SVG)])
        assert grid.empty_message() == ""
        assert grid.tile_names() == ["home"]

    def test_tile_click_emits_name(self):
        """Test clicking a tile emits its icon name."""
        grid = IconGrid()
        grid.set_icons([("home", HOME_SVG)])
        clicked: list[str] = []
        grid.icon_clicked.connect(clicked.append)
        grid.show()

        tile = grid.findChild(IconTile)
        QTest.mouseClick(tile, Qt.MouseButton.LeftButton)

        assert clicked == ["home"]

    def test_right_click_ignored(self):
        """Test right clicks do not emit."""
        tile = IconTile("home", HOME_SVG)
        clicked: list[str] = []
        tile.clicked.connect(clicked.append)
        tile.show()
        QTest.mouseClick(tile, Qt.MouseButton.RightButton)
        assert clicked == []


class TestPreviewWindow:
    """Tests for PreviewWindow."""

    def test_lists_library_icons(self, settings, library):
        """Test the window lists every library icon."""
        window = PreviewWindow(settings, library)
        assert window.visible_icons() == ["bell", "home", "mail", "star"]
        assert window.grid.tile_names() == ["bell", "home", "mail", "star"]

    def test_search_filters_case_insensitively(self, settings, library):
        """Test the search ignores letter case."""
        window = PreviewWindow(settings, library)
        window.set_query("M")
        assert window.grid.tile_names() == ["home", "mail"]

    def test_search_without_match(self, settings, library):
        """Test a search without hits shows the empty message."""
        window = PreviewWindow(settings, library)
        window.set_query("zzz")
        assert window.grid.tile_names() == []
        assert window.grid.empty_message() == 'No results found for "zzz"'

    def test_theme_starts_from_settings(self, settings, library):
        """Test the initial theme comes from settings."""
        settings.background = "#101010"
        window = PreviewWindow(settings, library)
        assert window.theme == Theme("#101010", "#ffffff", "#efefef")

    def test_valid_colors_applied_and_remembered(self, settings, library):
        """Test valid colors retheme the icons and are saved."""
        window = PreviewWindow(settings, library)
        window.set_colors("#ffcc00", "#336699", "#000000")

        assert window.theme == Theme("#000000", "#ffcc00", "#336699")
        assert settings.foreground_primary == "#ffcc00"
        svg = window.themed_svg("home")
        assert 'fill="#ffcc00"' in svg
        assert "background:#000000" in svg

    def test_invalid_color_keeps_previous_theme(self, settings, library):
        """Test an invalid color leaves the theme as it was."""
        window = PreviewWindow(settings, library)
        before = window.theme
        window.set_colors(before.foreground_primary, before.foreground_secondary, "black")
        assert window.theme == before

    def test_export_icon_writes_png(self, settings, library, tmp_path):
        """Test export writes a 512x512 PNG without temporary files."""
        window = PreviewWindow(settings, library)
        written = window.export_icon("home", tmp_path / "home.png")

        image = QImage(str(written))
        assert (image.width(), image.height()) == (512, 512)
        assert not list(tmp_path.glob("*-tmp.svg"))
