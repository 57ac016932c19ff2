from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

from .protocol import check_png, encode_png, write_png
from .protocol.encoding import MAX_STORED_BLOCK
from .protocol.job import DEFAULT_BACKGROUND, DEFAULT_SRGB_INTENT
from .protocol.types import Raster
from .rendering import SUPPORTED_EXTENSIONS, load_raster


@dataclass
class PngSettings:
    srgb_intent: Optional[int] = DEFAULT_SRGB_INTENT
    background: Optional[Tuple[int, int, int]] = DEFAULT_BACKGROUND
    max_block_size: int = MAX_STORED_BLOCK
    resize_width: Optional[int] = None


class PngJobBuilder:
    def __init__(self, settings: Optional[PngSettings] = None) -> None:
        self.settings = settings or PngSettings()

    def build_from_raster(self, raster: Raster) -> bytes:
        return encode_png(
            raster,
            srgb_intent=self.settings.srgb_intent,
            background=self.settings.background,
            max_block=self.settings.max_block_size,
        )

    def build_from_file(self, path: str) -> bytes:
        return self.build_from_raster(self.load(path))

    def load(self, path: str) -> Raster:
        self._validate_input_path(path)
        return load_raster(path, self.settings.resize_width)

    def check(self, raster: Raster) -> None:
        """Raise PreconditionViolation if the raster cannot be encoded with these settings."""
        check_png(
            raster,
            srgb_intent=self.settings.srgb_intent,
            background=self.settings.background,
            max_block=self.settings.max_block_size,
        )

    def write(self, stream: BinaryIO, raster: Raster) -> int:
        return write_png(
            stream,
            raster,
            srgb_intent=self.settings.srgb_intent,
            background=self.settings.background,
            max_block=self.settings.max_block_size,
        )

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
