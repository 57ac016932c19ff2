from __future__ import annotations

from ..errors import PreconditionViolation

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


def _check_range(value: int, limit: int, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise PreconditionViolation(f"{what} must be an integer, got {type(value).__name__}")
    if value < 0 or value > limit:
        raise PreconditionViolation(f"{what} {value} does not fit in 0..{limit}")


def be16(value: int) -> bytes:
    """Encode an unsigned 16-bit integer, most significant byte first."""
    _check_range(value, UINT16_MAX, "16-bit value")
    return value.to_bytes(2, "big")


def be32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer, most significant byte first."""
    _check_range(value, UINT32_MAX, "32-bit value")
    return value.to_bytes(4, "big")


def stored_block_length(length: int) -> bytes:
    """Encode a stored DEFLATE block length as LEN then NLEN.

    LEN is little-endian 16-bit; NLEN is its one's complement so a decoder
    can validate the length.
    """
    _check_range(length, UINT16_MAX, "Stored block length")
    raw = length.to_bytes(2, "little")
    return raw + bytes(255 - value for value in raw)


def read_be32(data: bytes, offset: int = 0) -> int:
    field = bytes(data[offset : offset + 4])
    if len(field) != 4:
        raise ValueError(f"Need 4 bytes at offset {offset}, got {len(field)}")
    return int.from_bytes(field, "big")


def read_stored_block_length(data: bytes, offset: int = 0) -> int:
    """Decode a LEN/NLEN pair, rejecting a mismatched complement."""
    field = bytes(data[offset : offset + 4])
    if len(field) != 4:
        raise ValueError(f"Need 4 bytes at offset {offset}, got {len(field)}")
    length = int.from_bytes(field[:2], "little")
    complement = int.from_bytes(field[2:], "little")
    if length ^ complement != UINT16_MAX:
        raise ValueError(f"Stored block length {length:#06x} does not match complement {complement:#06x}")
    return length
