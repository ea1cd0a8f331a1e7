from __future__ import annotations

import unittest

from crc32lut import crc32_luts, create_crc32_lut, destroy_crc32_lut
from crc32lut.constants import POLY_CASTAGNOLI, POLY_IEEE, POLY_KOOPMAN, POLY_KOOPMAN_HD18


EXPECTED_POLYNOMIALS = {
    "IEEE": POLY_IEEE,
    "Castagnoli": POLY_CASTAGNOLI,
    "Koopman": POLY_KOOPMAN,
    "Koopman_hd18": POLY_KOOPMAN_HD18,
}


class DefaultTablesTests(unittest.TestCase):
    def test_polynomial_values(self):
        self.assertEqual(POLY_IEEE, 0xEDB88320)
        self.assertEqual(POLY_CASTAGNOLI, 0x82F63B78)
        self.assertEqual(POLY_KOOPMAN, 0xEB31D82E)
        self.assertEqual(POLY_KOOPMAN_HD18, 0x973AFB51)

    def test_named_tables(self):
        self.assertEqual(crc32_luts._fields, tuple(EXPECTED_POLYNOMIALS))
        for name, poly in EXPECTED_POLYNOMIALS.items():
            lut = getattr(crc32_luts, name)
            self.assertEqual(lut.polynomial, poly)
            self.assertTrue(lut.static)
            self.assertEqual(len(lut), 256)

    def test_equal_to_builder_output(self):
        for lut in crc32_luts:
            custom = create_crc32_lut(lut.polynomial)
            self.assertEqual(tuple(custom), tuple(lut))
            self.assertTrue(destroy_crc32_lut(custom))

    def test_never_released(self):
        for lut in crc32_luts:
            self.assertFalse(destroy_crc32_lut(lut))
            self.assertFalse(lut.release())
            with lut:
                pass
            self.assertFalse(lut.released)
            self.assertEqual(lut[0x80], lut.polynomial)

    def test_container_is_immutable(self):
        with self.assertRaises(AttributeError):
            crc32_luts.IEEE = create_crc32_lut(0)


if __name__ == "__main__":
    unittest.main()
