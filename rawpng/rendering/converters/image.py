from __future__ import annotations

from typing import Optional

from ...protocol.types import Raster
from ..renderer import image_to_raster
from .base import RasterConverter


class ImageConverter(RasterConverter):
    def load(self, path: str, width: Optional[int] = None) -> Raster:
        return image_to_raster(self._scale_to_width(self._load_rgba(path), width))
