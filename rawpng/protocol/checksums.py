from __future__ import annotations

from typing import Iterable, List, NamedTuple, Tuple

CRC32_POLYNOMIAL = 0xEDB88320
CRC32_SEED = 0xFFFFFFFF
ADLER32_MOD = 65521


def build_crc32_table() -> Tuple[int, ...]:
    """Build the reflected CRC-32 lookup table for every byte value."""
    table: List[int] = []
    for value in range(256):
        crc = value
        for _ in range(8):
            if crc & 1:
                crc = CRC32_POLYNOMIAL ^ (crc >> 1)
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CRC32_TABLE = build_crc32_table()


def crc32_update(crc: int, data: Iterable[int]) -> int:
    """Feed bytes into a running CRC-32 register and return the new register."""
    table = CRC32_TABLE
    for value in data:
        crc = table[(crc ^ value) & 0xFF] ^ (crc >> 8)
    return crc


def crc32_finalize(crc: int) -> int:
    return crc ^ 0xFFFFFFFF


def crc32(data: Iterable[int]) -> int:
    """Return the CRC-32 of ``data`` as used by PNG chunks."""
    return crc32_finalize(crc32_update(CRC32_SEED, data))


class AdlerState(NamedTuple):
    a: int = 1
    b: int = 0


def adler32_init() -> AdlerState:
    return AdlerState()


def adler32_update(state: AdlerState, data: Iterable[int]) -> AdlerState:
    """Feed bytes into a running Adler-32 state.

    The state is carried between calls so one checksum can span every
    scanline of an image.
    """
    a, b = state
    for value in data:
        a = (a + value) % ADLER32_MOD
        b = (b + a) % ADLER32_MOD
    return AdlerState(a, b)


def adler32_finalize(state: AdlerState) -> int:
    return (state.b << 16) | state.a


def adler32(data: Iterable[int]) -> int:
    """Return the Adler-32 of ``data`` as used by zlib streams."""
    return adler32_finalize(adler32_update(adler32_init(), data))
