"""Tests for demo patterns and image loaders."""

import pytest
from PIL import Image

from rawpng.protocol import Pixel
from rawpng.rendering import (
    RasterLoader,
    build_pattern,
    checker_raster,
    gradient_raster,
    image_to_raster,
    load_raster,
    solid_raster,
)


def test_gradient_corners():
    raster = gradient_raster(256, 256)
    assert raster.pixel_at(0, 0) == Pixel(255, 0, 127, 127)
    assert raster.pixel_at(255, 255) == Pixel(0, 255, 127, 127)
    assert raster.pixel_at(0, 255) == Pixel(255, 255, 0, 255)


def test_gradient_halves_truncate_toward_zero():
    raster = gradient_raster(512, 1)
    # (0 - 256 + 255) / 2 truncates to 0, not -1.
    assert raster.pixel_at(0, 256).b == 0
    assert raster.pixel_at(0, 256).a == 255
    assert raster.pixel_at(0, 258).b == 255


def test_checker_and_solid():
    raster = checker_raster(4, 4, cell=2)
    assert raster.pixel_at(0, 0) == Pixel(255, 0, 255, 255)
    assert raster.pixel_at(0, 2) == Pixel(0, 255, 0, 255)
    assert raster.pixel_at(2, 2) == Pixel(255, 0, 255, 255)
    assert solid_raster(3, 1, (1, 2, 3, 4)).data.tobytes() == b"\x01\x02\x03\x04" * 3


def test_unknown_pattern():
    with pytest.raises(ValueError):
        build_pattern("plaid", 2, 2)


def test_image_to_raster_adds_alpha():
    img = Image.new("RGB", (2, 1), (10, 20, 30))
    raster = image_to_raster(img)
    assert (raster.width, raster.height) == (2, 1)
    assert raster.pixel_at(0, 1) == Pixel(10, 20, 30, 255)


def test_load_raster_from_file(tmp_path):
    path = tmp_path / "source.png"
    Image.new("RGBA", (4, 2), (1, 2, 3, 4)).save(path)
    raster = load_raster(str(path))
    assert (raster.width, raster.height) == (4, 2)
    assert raster.pixel_at(1, 3) == Pixel(1, 2, 3, 4)


def test_load_raster_resizes(tmp_path):
    path = tmp_path / "source.bmp"
    Image.new("RGB", (8, 4), (200, 100, 50)).save(path)
    raster = load_raster(str(path), width=4)
    assert (raster.width, raster.height) == (4, 2)


def test_loader_rejects_unknown_extension():
    loader = RasterLoader()
    assert ".png" in loader.supported_extensions
    with pytest.raises(ValueError):
        loader.load("picture.tiff")


def test_loaded_images_arrive_as_rgba(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (6, 3), 77).save(path)
    raster = load_raster(str(path), width=2)
    assert (raster.width, raster.height) == (2, 1)
    assert raster.pixel_at(0, 1) == Pixel(77, 77, 77, 255)
