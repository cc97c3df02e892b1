"""Tests for image loading with Pillow."""

import numpy as np
import pytest
from PIL import Image

from asciispin.config import ASCII_CHARS, BLANK, WIDTH, HEIGHT
from asciispin.model.errors import AsciiSpinError, ImageLoadError
from asciispin.model.io import load_luminance, load_grid


class TestLoadLuminance:
    def test_resized_to_requested_size(self, make_image):
        path = make_image(size=(640, 100), value=90)
        samples = load_luminance(path, width=30, height=12)
        assert samples.shape == (12, 30)
        assert samples.dtype == np.uint8

    def test_default_size(self, make_image):
        path = make_image(size=(50, 50), value=0)
        assert load_luminance(path).shape == (HEIGHT, WIDTH)

    def test_color_image_converted_to_gray(self, make_image):
        path = make_image(name="red.png", size=(8, 8), value=(255, 0, 0), mode="RGB")
        samples = load_luminance(path, width=4, height=4)
        # ITU-R 601-2 luma of pure red
        assert np.all(np.abs(samples.astype(int) - 76) <= 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageLoadError, match="file not found"):
            load_luminance(str(tmp_path / "nope.png"))

    def test_undecodable_file(self, tmp_path):
        bogus = tmp_path / "bogus.png"
        bogus.write_bytes(b"definitely not an image")
        with pytest.raises(ImageLoadError) as info:
            load_luminance(str(bogus))
        assert info.value.path == str(bogus)
        assert isinstance(info.value, AsciiSpinError)

    def test_invalid_dimensions(self, make_image):
        path = make_image()
        with pytest.raises(ValueError):
            load_luminance(path, width=0, height=10)

    def test_oversized_image_rejected(self, make_image, monkeypatch):
        path = make_image(size=(100, 100))
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        with pytest.raises(ImageLoadError, match="image too large"):
            load_luminance(path, width=4, height=4)


class TestLoadGrid:
    def test_tiny_black_image_upscaled(self, make_image):
        path = make_image(size=(2, 2), value=0)
        grid = load_grid(path, width=4, height=4)
        assert grid.shape == (4, 4)
        assert (grid == ASCII_CHARS[0]).all()

    def test_white_background_is_blank(self, make_image):
        path = make_image(size=(10, 10), value=255)
        grid = load_grid(path, width=5, height=5)
        assert (grid == BLANK).all()

    def test_dark_square_on_white(self, make_image):
        pixels = np.full((20, 20), 255, dtype=np.uint8)
        pixels[5:15, 5:15] = 0
        path = make_image(array=pixels)
        grid = load_grid(path, width=10, height=10)
        assert grid[5, 5] == ASCII_CHARS[0]
        assert grid[0, 0] == BLANK

    def test_shape_independent_of_source(self, make_image):
        for i, size in enumerate([(1, 1), (3, 700), (900, 2)]):
            path = make_image(name=f"s{i}.png", size=size, value=10)
            assert load_grid(path, width=7, height=3).shape == (3, 7)
