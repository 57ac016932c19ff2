from __future__ import annotations

import io
import logging
from typing import BinaryIO, List, Optional, Tuple

from .chunks import Chunk, bkgd_chunk, iend_chunk, ihdr_chunk, srgb_chunk, write_bytes, write_chunk
from .encoding import MAX_STORED_BLOCK, check_block_size, idat_payload_length, write_idat_chunk
from .types import Raster

logger = logging.getLogger(__name__)

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])
DEFAULT_SRGB_INTENT = 0
# Serialized as 00 FF 00 FF 00 FF.
DEFAULT_BACKGROUND = (0x00FF, 0x00FF, 0x00FF)


def check_png(
    raster: Raster,
    srgb_intent: Optional[int] = DEFAULT_SRGB_INTENT,
    background: Optional[Tuple[int, int, int]] = DEFAULT_BACKGROUND,
    max_block: int = MAX_STORED_BLOCK,
) -> List[Chunk]:
    """Check every precondition and return the chunks that precede IDAT.

    Raises ``PreconditionViolation`` without touching any sink, so callers
    can validate before opening their output.
    """
    raster.validate()
    check_block_size(max_block)
    idat_payload_length(raster.width, raster.height, max_block)
    header = [ihdr_chunk(raster.width, raster.height)]
    if srgb_intent is not None:
        header.append(srgb_chunk(srgb_intent))
    if background is not None:
        header.append(bkgd_chunk(background))
    return header


def write_png(
    stream: BinaryIO,
    raster: Raster,
    srgb_intent: Optional[int] = DEFAULT_SRGB_INTENT,
    background: Optional[Tuple[int, int, int]] = DEFAULT_BACKGROUND,
    max_block: int = MAX_STORED_BLOCK,
) -> int:
    """Write a full PNG image to ``stream`` and return the number of bytes written.

    Chunks are written in the fixed order IHDR, sRGB, bKGD, IDAT, IEND;
    passing ``None`` for ``srgb_intent`` or ``background`` leaves that
    ancillary chunk out. Every precondition is checked before the first
    byte is written. Sink failures raise ``SinkWriteError`` and may leave
    partial output behind.
    """
    header = check_png(raster, srgb_intent, background, max_block)

    logger.debug("Encoding %dx%d raster", raster.width, raster.height)
    written = write_bytes(stream, PNG_SIGNATURE)
    for chunk in header:
        written += write_chunk(stream, chunk)
    written += write_idat_chunk(stream, raster, max_block)
    written += write_chunk(stream, iend_chunk())
    logger.debug("Wrote %d bytes", written)
    return written


def encode_png(
    raster: Raster,
    srgb_intent: Optional[int] = DEFAULT_SRGB_INTENT,
    background: Optional[Tuple[int, int, int]] = DEFAULT_BACKGROUND,
    max_block: int = MAX_STORED_BLOCK,
) -> bytes:
    """Encode a raster into PNG bytes held in memory."""
    buffer = io.BytesIO()
    write_png(buffer, raster, srgb_intent, background, max_block)
    return buffer.getvalue()
