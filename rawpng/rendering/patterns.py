from __future__ import annotations

from typing import Tuple

from ..protocol.types import Raster

PATTERNS = ("gradient", "checker", "solid")


def _half_toward_zero(value: int) -> int:
    return -(-value // 2) if value < 0 else value // 2


def gradient_raster(width: int, height: int) -> Raster:
    """Diagonal color/alpha gradient, the classic demo image."""
    raster = Raster.alloc(width, height)
    for row in range(height):
        for col in range(width):
            raster.set_pixel_at(
                row,
                col,
                255 - (row * 256 // height),
                col * 256 // width,
                _half_toward_zero(row - col + 255) & 0xFF,
                _half_toward_zero(col - row + 255) & 0xFF,
            )
    return raster


def checker_raster(
    width: int,
    height: int,
    cell: int = 16,
    colors: Tuple[Tuple[int, int, int, int], Tuple[int, int, int, int]] = (
        (255, 0, 255, 255),
        (0, 255, 0, 255),
    ),
) -> Raster:
    if cell <= 0:
        raise ValueError("Cell size must be greater than zero")
    raster = Raster.alloc(width, height)
    for row in range(height):
        for col in range(width):
            color = colors[((row // cell) + (col // cell)) % 2]
            raster.set_pixel_at(row, col, *color)
    return raster


def solid_raster(width: int, height: int, color: Tuple[int, int, int, int] = (255, 255, 255, 255)) -> Raster:
    raster = Raster.alloc(width, height)
    pixel = bytes(color)
    raster.data[:] = pixel * (width * height)
    return raster


def build_pattern(name: str, width: int, height: int) -> Raster:
    if name == "gradient":
        return gradient_raster(width, height)
    if name == "checker":
        return checker_raster(width, height)
    if name == "solid":
        return solid_raster(width, height)
    raise ValueError(f"Unknown pattern '{name}' (choose from {', '.join(PATTERNS)})")
