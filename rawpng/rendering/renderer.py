from __future__ import annotations

from PIL import Image

from ..protocol.types import Raster


def image_to_raster(img: Image.Image) -> Raster:
    """Convert a Pillow image to an RGBA raster, copying its pixels."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    return Raster.from_buffer(bytearray(img.tobytes()), width, height)
