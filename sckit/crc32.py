"""CRC-32C (Castagnoli) checksum, computed incrementally over byte data."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

POLY = 0x82F63B78
"""CRC-32C polynomial in reversed bit order."""

_MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        crc = n
        for _ in range(8):
            crc = (crc >> 1) ^ POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc32c(data: BytesLike, crc: int = 0) -> int:
    """Return the CRC-32C of ``data``.

    ``crc`` is the result of a previous call when the checksum of a larger
    input is computed piece by piece; it is zero for a fresh calculation.
    """
    if not 0 <= crc <= _MASK:
        raise ValueError("crc must be an unsigned 32-bit value")
    raw = memoryview(data).tobytes()

    table = _TABLE
    value = crc ^ _MASK
    for byte in raw:
        value = table[(value ^ byte) & 0xFF] ^ (value >> 8)
    return value ^ _MASK