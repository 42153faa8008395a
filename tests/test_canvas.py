"""Unit tests for the image canvas and its PPM/Pillow output."""

import numpy as np
import pytest
from PIL import Image

from core.color import BLACK, Color
from core.errors import SceneError
from renderer.canvas import PPM_LINE_LIMIT, Canvas


class TestCanvas:
    """Tests for pixel access."""

    def test_new_canvas_is_black(self):
        c = Canvas(10, 20)
        assert (c.width, c.height) == (10, 20)
        assert all(c.pixel_at(x, y) == BLACK for x in range(10) for y in range(20))

    def test_write_and_read_pixel(self):
        c = Canvas(10, 20)
        red = Color(1, 0, 0)
        c.write_pixel(2, 3, red)
        assert c.pixel_at(2, 3) == red

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds(self, x, y):
        with pytest.raises(SceneError):
            Canvas(10, 20).write_pixel(x, y, BLACK)

    @pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_size(self, w, h):
        with pytest.raises(SceneError):
            Canvas(w, h)

    def test_values_above_one_are_kept(self):
        c = Canvas(1, 1)
        c.write_pixel(0, 0, Color(1.5, 0, 0))
        assert c.pixel_at(0, 0) == Color(1.5, 0, 0)


class TestPPM:
    """Tests for P3 serialization."""

    def test_header(self):
        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data_is_clamped_and_rounded(self):
        c = Canvas(5, 3)
        c.write_pixel(0, 0, Color(1.5, 0, 0))
        c.write_pixel(2, 1, Color(0, 0.5, 0))
        c.write_pixel(4, 2, Color(-0.5, 0, 1))
        lines = c.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        c = Canvas(10, 2, Color(1, 0.8, 0.6))
        lines = c.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= PPM_LINE_LIMIT for line in lines)

    def test_ends_with_newline(self):
        assert Canvas(5, 3).to_ppm().endswith("\n")

    def test_rgb8(self):
        c = Canvas(2, 1)
        c.write_pixel(1, 0, Color(0.5, 2.0, -1.0))
        rgb = c.to_rgb8()
        assert rgb.shape == (1, 2, 3)
        assert rgb.dtype == np.uint8
        assert rgb[0, 1].tolist() == [128, 255, 0]


class TestSave:
    """Tests for writing images to disk."""

    def test_save_ppm(self, tmp_path):
        c = Canvas(3, 2, Color(1, 0, 0))
        path = tmp_path / "out.ppm"
        c.save(str(path))
        assert path.read_text() == c.to_ppm()

    def test_save_png(self, tmp_path):
        c = Canvas(4, 3)
        c.write_pixel(3, 2, Color(0, 1, 0))
        path = tmp_path / "out.png"
        c.save(str(path))
        with Image.open(path) as img:
            assert img.size == (4, 3)
            assert img.convert("RGB").getpixel((3, 2)) == (0, 255, 0)
            assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 0)
