from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, List

from ..errors import PreconditionViolation
from .byteorder import be32, stored_block_length
from .checksums import (
    CRC32_SEED,
    adler32_finalize,
    adler32_init,
    adler32_update,
    crc32_finalize,
    crc32_update,
)
from .chunks import MAX_CHUNK_LENGTH, write_bytes
from .types import BYTES_PER_PIXEL, Raster

logger = logging.getLogger(__name__)

# CMF 0x08: deflate with a 256-byte window; FLG 0x1D makes CMF*256+FLG divisible by 31.
ZLIB_HEADER = bytes([0x08, 0x1D])
ADLER32_LENGTH = 4
MAX_STORED_BLOCK = 65535
STORED_BLOCK_OVERHEAD = 5
FILTER_NONE = 0


def check_block_size(max_block: int) -> None:
    if not isinstance(max_block, int) or isinstance(max_block, bool) or not 1 <= max_block <= MAX_STORED_BLOCK:
        raise PreconditionViolation(f"Stored block size must be 1..{MAX_STORED_BLOCK}, got {max_block!r}")


def row_block_lengths(bytes_per_row: int, max_block: int = MAX_STORED_BLOCK) -> List[int]:
    """Split one filtered scanline into stored-block segment lengths.

    Every segment is ``max_block`` long except the last, which carries the
    remainder. A row that is an exact multiple of ``max_block`` ends with a
    full block rather than an empty one.
    """
    check_block_size(max_block)
    if bytes_per_row <= 0:
        raise PreconditionViolation("Rows must hold at least one byte")
    blocks = (bytes_per_row + max_block - 1) // max_block
    remainder = bytes_per_row % max_block or max_block
    return [max_block] * (blocks - 1) + [remainder]


def idat_payload_length(width: int, height: int, max_block: int = MAX_STORED_BLOCK) -> int:
    """Return the IDAT payload size: zlib header, stored blocks, Adler-32."""
    bytes_per_row = width * BYTES_PER_PIXEL + 1
    blocks_per_row = len(row_block_lengths(bytes_per_row, max_block))
    length = len(ZLIB_HEADER) + height * (bytes_per_row + STORED_BLOCK_OVERHEAD * blocks_per_row) + ADLER32_LENGTH
    if length > MAX_CHUNK_LENGTH:
        raise PreconditionViolation(
            f"A {width}x{height} image needs an IDAT payload of {length} bytes, over the {MAX_CHUNK_LENGTH} limit"
        )
    return length


def iter_scanlines(raster: Raster) -> Iterator[bytes]:
    """Yield each row prefixed with the "no filtering" filter byte."""
    prefix = bytes([FILTER_NONE])
    for row in range(raster.height):
        yield prefix + raster.row_bytes(row).tobytes()


def write_idat_chunk(stream: BinaryIO, raster: Raster, max_block: int = MAX_STORED_BLOCK) -> int:
    """Stream the single IDAT chunk holding the whole image.

    The payload is a zlib stream made of stored (uncompressed) DEFLATE
    blocks, one group of blocks per scanline. The chunk CRC covers the
    type tag and every payload byte; the Adler-32 trailer covers only the
    filtered scanlines. Returns the number of bytes written.
    """
    raster.validate()
    length = idat_payload_length(raster.width, raster.height, max_block)
    bytes_per_row = raster.width * BYTES_PER_PIXEL + 1
    block_lengths = row_block_lengths(bytes_per_row, max_block)
    logger.debug(
        "IDAT: %d bytes per row, %d blocks per row, payload %d bytes",
        bytes_per_row,
        len(block_lengths),
        length,
    )

    written = write_bytes(stream, be32(length))
    crc = CRC32_SEED
    adler = adler32_init()

    def emit(data: bytes) -> None:
        nonlocal crc, written
        written += write_bytes(stream, data)
        crc = crc32_update(crc, data)

    emit(b"IDAT")
    emit(ZLIB_HEADER)
    last_row = raster.height - 1
    for row, scanline in enumerate(iter_scanlines(raster)):
        adler = adler32_update(adler, scanline)
        offset = 0
        for index, block_length in enumerate(block_lengths):
            is_final = row == last_row and index == len(block_lengths) - 1
            emit(bytes([1 if is_final else 0]) + stored_block_length(block_length))
            emit(scanline[offset : offset + block_length])
            offset += block_length

    adler_value = adler32_finalize(adler)
    emit(be32(adler_value))
    crc_value = crc32_finalize(crc)
    written += write_bytes(stream, be32(crc_value))
    logger.debug("IDAT: adler32=%08x crc32=%08x", adler_value, crc_value)
    return written
