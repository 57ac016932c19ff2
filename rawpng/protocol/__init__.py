from .byteorder import be16, be32, read_be32, read_stored_block_length, stored_block_length
from .checksums import (
    AdlerState,
    CRC32_TABLE,
    adler32,
    adler32_finalize,
    adler32_init,
    adler32_update,
    crc32,
    crc32_finalize,
    crc32_update,
)
from .chunks import Chunk, bkgd_chunk, iend_chunk, ihdr_chunk, make_chunk, srgb_chunk, write_chunk
from .encoding import idat_payload_length, iter_scanlines, row_block_lengths, write_idat_chunk
from .job import PNG_SIGNATURE, check_png, encode_png, write_png
from .types import Pixel, Raster

__all__ = [
    "AdlerState",
    "adler32",
    "adler32_finalize",
    "adler32_init",
    "adler32_update",
    "be16",
    "be32",
    "bkgd_chunk",
    "check_png",
    "Chunk",
    "CRC32_TABLE",
    "crc32",
    "crc32_finalize",
    "crc32_update",
    "encode_png",
    "idat_payload_length",
    "iend_chunk",
    "ihdr_chunk",
    "iter_scanlines",
    "make_chunk",
    "Pixel",
    "PNG_SIGNATURE",
    "Raster",
    "read_be32",
    "read_stored_block_length",
    "row_block_lengths",
    "srgb_chunk",
    "stored_block_length",
    "write_chunk",
    "write_idat_chunk",
    "write_png",
]
