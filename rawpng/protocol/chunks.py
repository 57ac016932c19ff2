from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Tuple

from ..errors import PreconditionViolation, SinkWriteError
from .byteorder import be16, be32
from .checksums import CRC32_SEED, crc32_finalize, crc32_update

CHUNK_TYPE_LENGTH = 4
MAX_CHUNK_LENGTH = 2**31 - 1

BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
COMPRESSION_DEFLATE = 0
FILTER_METHOD_ADAPTIVE = 0
INTERLACE_NONE = 0

SRGB_INTENTS = range(4)


def write_bytes(stream: BinaryIO, data: bytes) -> int:
    """Write ``data`` to the sink, failing loudly on errors and short writes."""
    try:
        written = stream.write(data)
    except OSError as exc:
        raise SinkWriteError(f"Write of {len(data)} bytes failed: {exc}") from exc
    if written is not None and written < len(data):
        raise SinkWriteError(f"Short write: sink accepted {written} of {len(data)} bytes")
    return len(data)


def check_chunk_type(chunk_type: bytes) -> bytes:
    chunk_type = bytes(chunk_type)
    if len(chunk_type) != CHUNK_TYPE_LENGTH or not chunk_type.isalpha() or not chunk_type.isascii():
        raise PreconditionViolation(f"Chunk type must be four ASCII letters, got {chunk_type!r}")
    return chunk_type


@dataclass(frozen=True)
class Chunk:
    """A PNG chunk: four-letter type tag and its payload."""

    type: bytes
    payload: bytes

    @property
    def length(self) -> int:
        return len(self.payload)

    def crc(self) -> int:
        """CRC-32 over the type tag followed by the payload."""
        crc = crc32_update(CRC32_SEED, self.type)
        crc = crc32_update(crc, self.payload)
        return crc32_finalize(crc)

    def to_bytes(self) -> bytes:
        return be32(self.length) + self.type + self.payload + be32(self.crc())


def make_chunk(chunk_type: bytes, payload: bytes = b"") -> Chunk:
    """Build a chunk after checking its type tag and length."""
    chunk_type = check_chunk_type(chunk_type)
    payload = bytes(payload)
    if len(payload) > MAX_CHUNK_LENGTH:
        raise PreconditionViolation(f"Chunk payload of {len(payload)} bytes exceeds {MAX_CHUNK_LENGTH}")
    return Chunk(chunk_type, payload)


def write_chunk(stream: BinaryIO, chunk: Chunk) -> int:
    """Write length, type, payload and CRC; return the number of bytes written."""
    return write_bytes(stream, chunk.to_bytes())


def ihdr_chunk(width: int, height: int) -> Chunk:
    """Build the IHDR chunk for 8-bit truecolor with alpha, no interlacing."""
    payload = (
        be32(width)
        + be32(height)
        + bytes(
            [
                BIT_DEPTH,
                COLOR_TYPE_RGBA,
                COMPRESSION_DEFLATE,
                FILTER_METHOD_ADAPTIVE,
                INTERLACE_NONE,
            ]
        )
    )
    return make_chunk(b"IHDR", payload)


def srgb_chunk(intent: int = 0) -> Chunk:
    """Build the sRGB chunk (0 = perceptual rendering intent)."""
    if intent not in SRGB_INTENTS:
        raise PreconditionViolation(f"sRGB rendering intent must be 0..3, got {intent}")
    return make_chunk(b"sRGB", bytes([intent]))


def bkgd_chunk(background: Tuple[int, int, int]) -> Chunk:
    """Build the bKGD chunk from three 16-bit RGB values."""
    if len(background) != 3:
        raise PreconditionViolation(f"Background must have three components, got {len(background)}")
    return make_chunk(b"bKGD", b"".join(be16(value) for value in background))


def iend_chunk() -> Chunk:
    return make_chunk(b"IEND")
