from .errors import PreconditionViolation, SinkWriteError
from .png_job import PngJobBuilder, PngSettings
from .protocol import Pixel, Raster, encode_png, write_png

__version__ = "1.1.0"

__all__ = [
    "encode_png",
    "Pixel",
    "PngJobBuilder",
    "PngSettings",
    "PreconditionViolation",
    "Raster",
    "SinkWriteError",
    "write_png",
]
