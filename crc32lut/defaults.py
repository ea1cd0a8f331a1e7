"""Process-wide tables for well-known CRC-32 polynomials.

Built once when the module is first imported and never released;
``destroy_crc32_lut`` refuses them.
"""

from __future__ import annotations

from typing import NamedTuple

from .constants import POLY_CASTAGNOLI, POLY_IEEE, POLY_KOOPMAN, POLY_KOOPMAN_HD18
from .table import Crc32Lut


class Crc32DefaultLuts(NamedTuple):
    # IEEE 802.3: PNG, Serial ATA, ZIP, Ethernet, MPEG-2
    IEEE: Crc32Lut
    # Castagnoli / CRC-32C: better error detection than IEEE (iSCSI, ext4, SCTP)
    Castagnoli: Crc32Lut
    # Koopman {1,3,28} / CRC-32K
    Koopman: Crc32Lut
    # Koopman, Hamming distance 18 at short lengths
    # https://users.ece.cmu.edu/~koopman/crc/index.html
    Koopman_hd18: Crc32Lut


crc32_luts = Crc32DefaultLuts(
    IEEE=Crc32Lut(POLY_IEEE, _static=True),
    Castagnoli=Crc32Lut(POLY_CASTAGNOLI, _static=True),
    Koopman=Crc32Lut(POLY_KOOPMAN, _static=True),
    Koopman_hd18=Crc32Lut(POLY_KOOPMAN_HD18, _static=True),
)
