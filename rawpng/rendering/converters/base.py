from __future__ import annotations

from typing import Optional

from PIL import Image, ImageOps

from ...protocol.types import Raster


class RasterConverter:
    def load(self, path: str, width: Optional[int] = None) -> Raster:
        raise NotImplementedError

    @staticmethod
    def _load_rgba(path: str) -> Image.Image:
        """Open an image upright and in RGBA, detached from the file."""
        with Image.open(path) as img:
            return ImageOps.exif_transpose(img).convert("RGBA")

    @staticmethod
    def _scale_to_width(img: Image.Image, width: Optional[int]) -> Image.Image:
        if width is None or img.width == width:
            return img
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        height = max(1, img.height * width // img.width)
        return img.resize((width, height), Image.LANCZOS)
