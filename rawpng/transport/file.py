from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

from ..png_job import PngJobBuilder, PngSettings
from ..protocol.types import Raster

logger = logging.getLogger(__name__)


class FileTransport:
    """Write encoded images to a file path.

    With ``atomic`` set, the image is streamed into a temporary file in the
    destination directory and renamed over ``path`` only once every byte is
    written, so a failed encode never leaves a truncated PNG behind.
    """

    def __init__(self, path: str, atomic: bool = True) -> None:
        self._path = path
        self._atomic = atomic

    @property
    def path(self) -> str:
        return self._path

    def write(self, raster: Raster, settings: Optional[PngSettings] = None) -> int:
        builder = PngJobBuilder(settings)
        builder.check(raster)
        if not self._atomic:
            with open(self._path, "wb") as handle:
                return builder.write(handle, raster)

        directory = os.path.dirname(os.path.abspath(self._path))
        temp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=directory, prefix=".rawpng-", suffix=".tmp", delete=False
            ) as handle:
                temp_path = handle.name
                written = builder.write(handle, raster)
            os.replace(temp_path, self._path)
            temp_path = None
            logger.debug("Replaced %s with %d bytes", self._path, written)
            return written
        finally:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
