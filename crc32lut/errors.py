class Crc32Error(Exception):
    """Base class for crc32lut errors."""


# Table lifecycle
class TableAllocationError(Crc32Error, MemoryError):
    """Backing storage for a lookup table could not be obtained."""


class InvalidTableError(Crc32Error):
    pass


class TableReleasedError(InvalidTableError):
    pass


# Argument bounds
class PolynomialRangeError(Crc32Error, ValueError):
    pass


class MissingDataError(Crc32Error, ValueError):
    pass


class DataLengthError(Crc32Error, ValueError):
    pass
