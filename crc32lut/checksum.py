from __future__ import annotations

import operator
from typing import Optional

from .constants import CRC_XOR, MASK32
from .errors import DataLengthError, MissingDataError
from .table import Crc32Lut, live_entries


def _byte_view(data, length: Optional[int]) -> memoryview:
    if data is None:
        if length:
            raise MissingDataError(f"data is None but length is {length}")
        return memoryview(b"")
    buf = memoryview(data)
    if buf.ndim != 1 or buf.format != "B":
        buf = buf.cast("B")
    if length is None:
        return buf
    length = operator.index(length)
    if not 0 <= length <= buf.nbytes:
        raise DataLengthError(f"length {length} out of range for {buf.nbytes}-byte buffer")
    return buf[:length]


def calculate_crc32(
    lut: Crc32Lut,
    data,
    length: Optional[int] = None,
    previous_crc32: int = 0,
) -> int:
    """Compute the CRC-32 of ``data[:length]`` with the table ``lut``.

    Args:
        lut: A live table, either one of ``crc32_luts`` or one from create_crc32_lut().
        data: Any buffer-protocol object. None is accepted only when length is 0 or None.
        length: Number of leading bytes to checksum; None means all of ``data``.
        previous_crc32: Result for the preceding chunk of a stream, or 0 to start fresh.

    Returns:
        The unsigned 32-bit checksum. With no input bytes this is ``previous_crc32``.

    Raises:
        InvalidTableError: ``lut`` is None or not a table.
        TableReleasedError: ``lut`` has been released.
        MissingDataError: ``data`` is None with a positive length.
        DataLengthError: ``length`` is negative or past the end of ``data``.
    """
    table = live_entries(lut)
    buf = _byte_view(data, length)
    crc = (previous_crc32 & MASK32) ^ CRC_XOR
    for b in buf:
        crc = table[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return crc ^ CRC_XOR


class Crc32Accumulator:
    """Running CRC-32 over a sequence of chunks sharing one table."""

    def __init__(self, lut: Crc32Lut, previous_crc32: int = 0):
        live_entries(lut)
        self.lut = lut
        self.crcvalue = previous_crc32 & MASK32

    def update(self, data, length: Optional[int] = None) -> "Crc32Accumulator":
        self.crcvalue = calculate_crc32(self.lut, data, length, self.crcvalue)
        return self

    def digest(self) -> bytes:
        # Big-endian, as stored after a PNG chunk
        return self.crcvalue.to_bytes(4, "big")

    def hexdigest(self) -> str:
        return f"{self.crcvalue:08x}"

    def copy(self) -> "Crc32Accumulator":
        return Crc32Accumulator(self.lut, self.crcvalue)
