"""
crc32lut: table-driven CRC-32 for any reflected polynomial.

- Build a 256-entry lookup table for any 32-bit polynomial (create_crc32_lut)
  and release it when done (destroy_crc32_lut, or use it as a context manager).
- Ready-made static tables for IEEE 802.3, Castagnoli, Koopman and
  Koopman-hd18 in ``crc32_luts``.
- calculate_crc32 takes the previous checksum as a seed, so a stream can be
  checksummed chunk by chunk (PNG chunks, for instance). Crc32Accumulator
  carries that seed for you.

Misuse (None or released tables, missing data) raises a Crc32Error subclass.
"""

from .checksum import Crc32Accumulator, calculate_crc32
from .defaults import crc32_luts
from .errors import (
    Crc32Error,
    DataLengthError,
    InvalidTableError,
    MissingDataError,
    PolynomialRangeError,
    TableAllocationError,
    TableReleasedError,
)
from .table import Crc32Lut, build_table, create_crc32_lut, destroy_crc32_lut

__version__ = "0.1"

__all__ = [
    "Crc32Accumulator",
    "Crc32Lut",
    "build_table",
    "calculate_crc32",
    "create_crc32_lut",
    "crc32_luts",
    "destroy_crc32_lut",
    "Crc32Error",
    "DataLengthError",
    "InvalidTableError",
    "MissingDataError",
    "PolynomialRangeError",
    "TableAllocationError",
    "TableReleasedError",
]
