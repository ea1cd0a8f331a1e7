"""CRC-32 lookup tables for arbitrary reflected polynomials.

The table is the byte-wise form of LSB-first polynomial division: entry ``b``
is the remainder left after clocking the eight bits of ``b`` through the
register. Tables are built with NumPy, advancing all 256 lanes per round.
"""

from __future__ import annotations

import operator
from typing import Iterator, Optional, Tuple

import numpy as np

from .constants import BITS_PER_BYTE, MASK32, TABLE_SIZE
from .errors import (
    InvalidTableError,
    PolynomialRangeError,
    TableAllocationError,
    TableReleasedError,
)


def _check_polynomial(polynomial) -> int:
    try:
        value = operator.index(polynomial)
    except TypeError:
        raise PolynomialRangeError(f"polynomial must be an integer, got {type(polynomial).__name__}") from None
    if isinstance(polynomial, bool) or not 0 <= value <= MASK32:
        raise PolynomialRangeError(f"polynomial {polynomial!r} is not a 32-bit value")
    return value


def build_table(polynomial: int) -> Tuple[int, ...]:
    """Return the 256 partial remainders for a reflected ``polynomial``.

    Each lane starts at its byte value and goes through eight rounds of
    ``r = (r >> 1) ^ polynomial if r & 1 else r >> 1``. Every 32-bit value is
    accepted, including the degenerate 0 and 0xFFFFFFFF.
    """
    poly = np.uint32(_check_polynomial(polynomial))
    lanes = np.arange(TABLE_SIZE, dtype=np.uint32)
    for _ in range(BITS_PER_BYTE):
        lanes = np.where(lanes & 1, (lanes >> 1) ^ poly, lanes >> 1)
    return tuple(lanes.tolist())


class Crc32Lut:
    """Lookup table for one reflected CRC-32 polynomial.

    Create with :func:`create_crc32_lut` and release exactly once with
    :func:`destroy_crc32_lut`, or use the table as a context manager. Entries
    never change while the table is live, so any number of checksums may read
    it at once; releasing it while one is in flight is the caller's race.
    """

    __slots__ = ("polynomial", "_entries", "_static")

    def __init__(self, polynomial: int, *, _static: bool = False):
        self.polynomial = _check_polynomial(polynomial)
        try:
            self._entries: Optional[Tuple[int, ...]] = build_table(self.polynomial)
        except MemoryError as exc:
            raise TableAllocationError(
                f"cannot allocate lookup table for polynomial {self.polynomial:#010x}"
            ) from exc
        self._static = _static

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()

    @property
    def released(self) -> bool:
        return self._entries is None

    @property
    def static(self) -> bool:
        return self._static

    @property
    def entries(self) -> Tuple[int, ...]:
        if self._entries is None:
            raise TableReleasedError(f"lookup table for polynomial {self.polynomial:#010x} was released")
        return self._entries

    def as_array(self) -> np.ndarray:
        """Read-only ``uint32`` copy of the entries."""
        arr = np.array(self.entries, dtype=np.uint32)
        arr.flags.writeable = False
        return arr

    def release(self) -> bool:
        # Static tables live for the whole process
        if self._static or self._entries is None:
            return False
        self._entries = None
        return True

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.entries)

    def __eq__(self, other):
        if not isinstance(other, Crc32Lut):
            return NotImplemented
        return self.polynomial == other.polynomial and self._entries == other._entries

    def __hash__(self):
        return hash(self.polynomial)

    def __repr__(self):
        state = "released" if self.released else ("static" if self._static else "live")
        return f"Crc32Lut(polynomial={self.polynomial:#010x}, {state})"


def create_crc32_lut(polynomial: int) -> Crc32Lut:
    """Build a caller-owned table for ``polynomial``.

    Raises TableAllocationError (and returns nothing) if storage for the
    table cannot be obtained. Release it with :func:`destroy_crc32_lut`.
    """
    return Crc32Lut(polynomial)


def destroy_crc32_lut(lut: Optional[Crc32Lut]) -> bool:
    """Release a table built by :func:`create_crc32_lut`.

    Returns False, leaving the table untouched, for None, non-tables,
    already-released tables and the static tables in ``crc32_luts``.
    """
    if not isinstance(lut, Crc32Lut):
        return False
    return lut.release()


def live_entries(lut) -> Tuple[int, ...]:
    if lut is None:
        raise InvalidTableError("lookup table is None")
    if not isinstance(lut, Crc32Lut):
        raise InvalidTableError(f"expected Crc32Lut, got {type(lut).__name__}")
    return lut.entries
