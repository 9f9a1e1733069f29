"""Tests for duskicons.core.rasterizer."""

from pathlib import Path

import pytest
from PySide6.QtGui import QImage

from duskicons.core.palette import Theme, recolor_svg
from duskicons.core.rasterizer import SvgRasterizer
from duskicons.errors import ErrorCode, RasterizationError

from conftest import HOME_SVG


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestConvertFile:
    """Tests for SvgRasterizer.convert_file."""

    def test_writes_512_png(self, tmp_path):
        """Test the default output is a 512x512 PNG."""
        source = _write(tmp_path / "home.svg", HOME_SVG)
        target = tmp_path / "home.png"

        written = SvgRasterizer().convert_file(source, target, 512, 512)

        assert written == target.resolve()
        image = QImage(str(written))
        assert not image.isNull()
        assert (image.width(), image.height()) == (512, 512)

    def test_custom_size(self, tmp_path):
        """Test an explicit size is honored."""
        source = _write(tmp_path / "home.svg", HOME_SVG)
        written = SvgRasterizer().convert_file(source, tmp_path / "small.png", 64, 32)
        image = QImage(str(written))
        assert (image.width(), image.height()) == (64, 32)

    def test_missing_input_returns_none(self, tmp_path):
        """Test a missing source yields no output."""
        result = SvgRasterizer().convert_file(tmp_path / "nope.svg", tmp_path / "nope.png")
        assert result is None
        assert not (tmp_path / "nope.png").exists()

    def test_invalid_svg_raises(self, tmp_path):
        """Test invalid markup raises SVG_INVALID."""
        source = _write(tmp_path / "broken.svg", "this is not svg")
        with pytest.raises(RasterizationError) as info:
            SvgRasterizer().convert_file(source, tmp_path / "broken.png")
        assert info.value.code is ErrorCode.SVG_INVALID

    def test_unwritable_target_raises(self, tmp_path):
        """Test an unwritable target raises PNG_WRITE_FAILED."""
        source = _write(tmp_path / "home.svg", HOME_SVG)
        with pytest.raises(RasterizationError) as info:
            SvgRasterizer().convert_file(source, tmp_path / "missing_dir" / "home.png")
        assert info.value.code is ErrorCode.PNG_WRITE_FAILED

    def test_background_color_rendered(self, tmp_path):
        """Test the themed background reaches the pixels."""
        theme = Theme(background="#336699", foreground_primary="#ffcc00", foreground_secondary="#00ff00")
        source = _write(tmp_path / "home.svg", recolor_svg(HOME_SVG, theme))

        written = SvgRasterizer().convert_file(source, tmp_path / "home.png")

        image = QImage(str(written))
        assert image.pixelColor(5, 256).name() == "#336699"


class TestRenderMarkup:
    """Tests for rendering in-memory markup."""

    def test_default_size(self):
        """Test markup renders at the default size."""
        image = SvgRasterizer().render_markup(HOME_SVG)
        assert (image.width(), image.height()) == (512, 512)

    def test_save_markup(self, tmp_path):
        """Test save_markup writes a PNG at the rasterizer size."""
        written = SvgRasterizer(128, 128).save_markup(HOME_SVG, tmp_path / "x.png")
        assert QImage(str(written)).width() == 128

    def test_invalid_markup_raises(self):
        """Test broken markup raises RasterizationError."""
        with pytest.raises(RasterizationError):
            SvgRasterizer().render_markup("<not-closed")
