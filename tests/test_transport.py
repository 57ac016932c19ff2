"""Tests for the settings builder and file transport."""

import os

import pytest
from PIL import Image

from rawpng import PngJobBuilder, PngSettings, PreconditionViolation
from rawpng.rendering import checker_raster
from rawpng.transport import FileTransport


def test_atomic_write(tmp_path):
    target = tmp_path / "out.png"
    raster = checker_raster(6, 3, cell=2)
    written = FileTransport(str(target)).write(raster)
    assert written == target.stat().st_size
    assert os.listdir(tmp_path) == ["out.png"]
    with Image.open(target) as img:
        assert img.tobytes() == raster.data.tobytes()


def test_failed_atomic_write_keeps_existing_file(tmp_path):
    target = tmp_path / "out.png"
    target.write_bytes(b"previous")
    with pytest.raises(PreconditionViolation):
        FileTransport(str(target)).write(checker_raster(2, 2), PngSettings(max_block_size=0))
    assert target.read_bytes() == b"previous"
    assert os.listdir(tmp_path) == ["out.png"]


@pytest.mark.parametrize(
    "settings",
    [
        PngSettings(max_block_size=0),
        PngSettings(srgb_intent=4),
        PngSettings(background=(0, 70000, 0)),
    ],
)
def test_rejected_direct_write_keeps_existing_file(tmp_path, settings):
    target = tmp_path / "out.png"
    target.write_bytes(b"previous")
    with pytest.raises(PreconditionViolation):
        FileTransport(str(target), atomic=False).write(checker_raster(2, 2), settings)
    assert target.read_bytes() == b"previous"


def test_builder_check():
    PngJobBuilder().check(checker_raster(2, 2))
    with pytest.raises(PreconditionViolation):
        PngJobBuilder(PngSettings(max_block_size=65536)).check(checker_raster(2, 2))


def test_direct_write(tmp_path):
    target = tmp_path / "direct.png"
    FileTransport(str(target), atomic=False).write(checker_raster(2, 2), PngSettings(srgb_intent=None))
    assert b"sRGB" not in target.read_bytes()


def test_builder_from_file(tmp_path):
    source = tmp_path / "in.jpg"
    Image.new("RGB", (10, 10), (255, 0, 0)).save(source)
    data = PngJobBuilder(PngSettings(resize_width=5)).build_from_file(str(source))
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    assert data[16:24] == b"\x00\x00\x00\x05\x00\x00\x00\x05"


def test_builder_validates_path(tmp_path):
    builder = PngJobBuilder()
    with pytest.raises(ValueError):
        builder.build_from_file(str(tmp_path / "notes.txt"))
    with pytest.raises(FileNotFoundError):
        builder.build_from_file(str(tmp_path / "missing.png"))
