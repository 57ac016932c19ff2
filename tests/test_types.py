"""Tests for the raster buffer and its stride invariant."""

import pytest

from rawpng.errors import PreconditionViolation
from rawpng.protocol import Pixel, Raster


def test_alloc_is_transparent_black():
    raster = Raster.alloc(3, 2)
    assert raster.data.nbytes == 24
    assert raster.pixel_at(1, 2) == Pixel(0, 0, 0, 0)


def test_set_and_get_pixel():
    raster = Raster.alloc(3, 2)
    raster.set_pixel_at(1, 2, 1, 2, 3, 4)
    assert raster.pixel_at(1, 2) == Pixel(1, 2, 3, 4)
    assert raster.pixel_at(1, 2).to_bytes() == b"\x01\x02\x03\x04"
    assert bytes(raster.row_bytes(1)) == bytes(8) + b"\x01\x02\x03\x04"


def test_pixel_stride_is_four_bytes():
    raster = Raster.alloc(5, 3)
    assert raster.stride == 4
    for row in range(3):
        for col in range(4):
            assert raster.pixel_offset(row, col + 1) - raster.pixel_offset(row, col) == 4


def test_single_column_rows_are_adjacent():
    raster = Raster.alloc(1, 3)
    assert raster.pixel_offset(1, 0) - raster.pixel_offset(0, 0) == 4


def test_from_buffer_wraps_without_copy():
    data = bytearray(8)
    raster = Raster.from_buffer(data, 2, 1)
    data[4:8] = b"\x09\x08\x07\x06"
    assert raster.pixel_at(0, 1) == Pixel(9, 8, 7, 6)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3), (True, 1), (2.0, 1)])
def test_bad_dimensions(width, height):
    with pytest.raises(PreconditionViolation):
        Raster.alloc(width, height)


def test_wrong_buffer_size_is_rejected():
    with pytest.raises(PreconditionViolation):
        Raster.from_buffer(bytearray(12), 2, 2)


def test_non_contiguous_buffer_is_rejected():
    strided = memoryview(bytearray(32))[::2]
    with pytest.raises(PreconditionViolation, match="contiguous"):
        Raster.from_buffer(strided, 2, 2)


def test_plain_bytes_must_go_through_from_buffer():
    with pytest.raises(PreconditionViolation):
        Raster(1, 1, b"\x00\x00\x00\x00")


def test_non_buffer_is_rejected():
    with pytest.raises(PreconditionViolation):
        Raster.from_buffer([0, 0, 0, 0], 1, 1)


def test_out_of_range_access():
    raster = Raster.alloc(2, 2)
    with pytest.raises(IndexError):
        raster.pixel_at(2, 0)
    with pytest.raises(IndexError):
        raster.row_bytes(-1)
    with pytest.raises(ValueError):
        raster.set_pixel_at(0, 0, 256, 0, 0, 0)
