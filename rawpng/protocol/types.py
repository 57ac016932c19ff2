from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import PreconditionViolation

BYTES_PER_PIXEL = 4
MAX_DIMENSION = 2**31 - 1

BufferLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Pixel:
    """One 8-bit RGBA pixel."""

    r: int
    g: int
    b: int
    a: int

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b, self.a))


def _check_dimension(value: int, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise PreconditionViolation(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise PreconditionViolation(f"{name} must be greater than zero")
    if value > MAX_DIMENSION:
        raise PreconditionViolation(f"{name} must not exceed {MAX_DIMENSION}")


@dataclass(frozen=True)
class Raster:
    """Row-major RGBA8 pixel buffer read by the PNG encoder.

    ``data`` is a flat, C-contiguous unsigned byte view holding
    ``width * height`` pixels of exactly four bytes each, with no row
    padding. The layout is checked when the raster is constructed, so
    every row can be streamed as one contiguous slice.
    """

    width: int
    height: int
    data: memoryview

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def alloc(cls, width: int, height: int) -> "Raster":
        """Allocate a transparent black raster."""
        _check_dimension(width, "Width")
        _check_dimension(height, "Height")
        return cls(width, height, memoryview(bytearray(width * height * BYTES_PER_PIXEL)))

    @classmethod
    def from_buffer(cls, buffer: BufferLike, width: int, height: int) -> "Raster":
        """Wrap an existing buffer without copying it.

        Any object supporting the buffer protocol is accepted as long as it
        is C-contiguous and holds exactly ``width * height * 4`` bytes.
        """
        try:
            view = memoryview(buffer)
        except TypeError as exc:
            raise PreconditionViolation(f"{type(buffer).__name__} does not support the buffer protocol") from exc
        if not view.c_contiguous:
            raise PreconditionViolation("Pixel buffer must be C-contiguous")
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        return cls(width, height, view)

    def validate(self) -> None:
        """Validate dimensions and the four-byte pixel stride."""
        _check_dimension(self.width, "Width")
        _check_dimension(self.height, "Height")
        if not isinstance(self.data, memoryview):
            raise PreconditionViolation("Pixel data must be a memoryview; use Raster.from_buffer()")
        if not self.data.c_contiguous or self.data.format != "B" or self.data.ndim != 1:
            raise PreconditionViolation("Pixel data must be a flat contiguous unsigned byte view")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if self.data.nbytes != expected:
            raise PreconditionViolation(
                f"Pixel data holds {self.data.nbytes} bytes, expected {expected} for {self.width}x{self.height}"
            )

    @property
    def stride(self) -> int:
        return BYTES_PER_PIXEL

    @property
    def row_stride(self) -> int:
        return self.width * BYTES_PER_PIXEL

    def pixel_offset(self, row: int, col: int) -> int:
        """Return the byte offset of a pixel. Row first, like array access."""
        if not 0 <= row < self.height or not 0 <= col < self.width:
            raise IndexError(f"Pixel ({row}, {col}) outside {self.width}x{self.height} raster")
        return row * self.row_stride + col * BYTES_PER_PIXEL

    def pixel_at(self, row: int, col: int) -> Pixel:
        offset = self.pixel_offset(row, col)
        r, g, b, a = self.data[offset : offset + BYTES_PER_PIXEL]
        return Pixel(r, g, b, a)

    def set_pixel_at(self, row: int, col: int, r: int, g: int, b: int, a: int) -> None:
        offset = self.pixel_offset(row, col)
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value {channel} outside 0..255")
        self.data[offset : offset + BYTES_PER_PIXEL] = bytes((r, g, b, a))

    def row_bytes(self, row: int) -> memoryview:
        """Return the raw pixel bytes of one row, without the filter byte."""
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} outside raster of height {self.height}")
        start = row * self.row_stride
        return self.data[start : start + self.row_stride]
