from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ...protocol.types import Raster
from .base import RasterConverter
from .image import ImageConverter

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


class RasterLoader:
    def __init__(self, converters: Optional[Dict[str, RasterConverter]] = None) -> None:
        if converters is None:
            image_converter = ImageConverter()
            converters = {ext: image_converter for ext in SUPPORTED_EXTENSIONS}
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str, width: Optional[int] = None) -> Raster:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path, width)


def load_raster(path: str, width: Optional[int] = None) -> Raster:
    return RasterLoader().load(path, width)


__all__ = ["RasterConverter", "RasterLoader", "SUPPORTED_EXTENSIONS", "load_raster"]
