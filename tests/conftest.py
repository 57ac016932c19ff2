"""Pytest fixtures shared by the encoder tests."""

import zlib

import pytest

from rawpng.protocol import Raster, read_be32


def split_chunks(data):
    """Split PNG bytes (after the signature) into (type, payload, crc) tuples."""
    chunks = []
    pos = 8
    while pos < len(data):
        length = read_be32(data, pos)
        chunk_type = bytes(data[pos + 4 : pos + 8])
        payload = bytes(data[pos + 8 : pos + 8 + length])
        crc = read_be32(data, pos + 8 + length)
        chunks.append((chunk_type, payload, crc))
        pos += 12 + length
    assert pos == len(data)
    for chunk_type, payload, crc in chunks:
        assert crc == zlib.crc32(chunk_type + payload)
    return chunks


@pytest.fixture
def parse_chunks():
    return split_chunks


@pytest.fixture
def two_pixel_raster():
    raster = Raster.alloc(2, 1)
    raster.set_pixel_at(0, 0, 255, 0, 0, 255)
    raster.set_pixel_at(0, 1, 0, 255, 0, 255)
    return raster


@pytest.fixture
def noise_raster():
    width, height = 7, 5
    data = bytearray((i * 37 + 11) % 256 for i in range(width * height * 4))
    return Raster.from_buffer(data, width, height)
