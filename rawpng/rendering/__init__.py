from .converters import SUPPORTED_EXTENSIONS, RasterLoader, load_raster
from .patterns import PATTERNS, build_pattern, checker_raster, gradient_raster, solid_raster
from .renderer import image_to_raster

__all__ = [
    "build_pattern",
    "checker_raster",
    "gradient_raster",
    "image_to_raster",
    "load_raster",
    "PATTERNS",
    "RasterLoader",
    "solid_raster",
    "SUPPORTED_EXTENSIONS",
]
