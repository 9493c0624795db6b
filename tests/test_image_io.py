"""Tests for P3 emission, Pillow export and the pygame preview surface."""

import io

import numpy as np
import pytest
from PIL import Image

from spheretracer.renderer.image_io import emit, save_image, to_image, write_ppm

PIXELS = np.array([
    [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
    [[10, 20, 30], [40, 50, 60], [70, 80, 90]],
], dtype=np.uint8)


class TestPpm:
    def test_header_and_pixel_lines(self):
        buffer = io.StringIO()
        write_ppm(PIXELS, buffer)
        lines = buffer.getvalue().splitlines()
        assert lines[:3] == ["P3", "3 2", "255"]
        assert lines[3:] == [
            "255 0 0", "0 255 0", "0 0 255",
            "10 20 30", "40 50 60", "70 80 90",
        ]

    def test_save_ppm_file(self, tmp_path):
        path = tmp_path / "out.ppm"
        save_image(PIXELS, path)
        text = path.read_text(encoding="ascii")
        assert text.startswith("P3\n3 2\n255\n")
        assert len(text.splitlines()) == 3 + 6

    def test_emit_to_stdout(self, capsys):
        emit(PIXELS, "-")
        assert capsys.readouterr().out.startswith("P3\n3 2\n255\n255 0 0\n")

    def test_write_failure_propagates(self, tmp_path):
        with pytest.raises(OSError):
            save_image(PIXELS, tmp_path / "missing" / "out.ppm")


class TestPillowExport:
    def test_png_round_trip(self, tmp_path):
        path = tmp_path / "out.png"
        save_image(PIXELS, path)
        with Image.open(path) as img:
            assert img.size == (3, 2)
            assert np.array_equal(np.asarray(img.convert("RGB")), PIXELS)

    def test_to_image_mode(self):
        assert to_image(PIXELS).mode == "RGB"


class TestPreviewSurface:
    def test_surface_matches_pixels(self):
        pygame = pytest.importorskip("pygame")
        from spheretracer.renderer.preview import to_surface

        surface = to_surface(PIXELS)
        assert surface.get_size() == (3, 2)
        assert tuple(surface.get_at((2, 0)))[:3] == (0, 0, 255)
        assert tuple(surface.get_at((0, 1)))[:3] == (10, 20, 30)
        assert isinstance(surface, pygame.Surface)
