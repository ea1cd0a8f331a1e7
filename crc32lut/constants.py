# Reflected (LSB-first) CRC-32 polynomials
POLY_IEEE = 0xEDB88320          # IEEE 802.3, normal form 0x04C11DB7
POLY_CASTAGNOLI = 0x82F63B78    # CRC-32C, normal form 0x1EDC6F41
POLY_KOOPMAN = 0xEB31D82E       # Koopman {1,3,28} / CRC-32K
POLY_KOOPMAN_HD18 = 0x973AFB51  # Koopman, HD=18 at short lengths

MASK32 = 0xFFFFFFFF

# One entry per possible byte value
TABLE_SIZE = 256
BITS_PER_BYTE = 8

# Pre- and post-complement applied around the table loop
CRC_XOR = MASK32
