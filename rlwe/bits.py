"""Bit-counting helpers for fixed-width unsigned integers."""

UINT8_MASK = (1 << 8) - 1
UINT64_MASK = (1 << 64) - 1
UINT128_MASK = (1 << 128) - 1


def count_ones_in_byte(x: int) -> int:
    """Return the number of set bits in the low 8 bits of ``x``."""
    return (x & UINT8_MASK).bit_count()


def count_ones64(x: int) -> int:
    """Return the number of set bits in the low 64 bits of ``x``."""
    return (x & UINT64_MASK).bit_count()


def count_leading_zeros64(x: int) -> int:
    """Return the number of leading zero bits of ``x`` as a 64-bit value."""
    return 64 - (x & UINT64_MASK).bit_length()


def count_leading_zeros128(x: int) -> int:
    """Return the number of leading zero bits of ``x`` as a 128-bit value."""
    x &= UINT128_MASK
    high = x >> 64
    if high:
        return count_leading_zeros64(high)
    return count_leading_zeros64(x) + 64


def bit_length(x: int) -> int:
    """Return the bit length of ``x`` taken as a 128-bit unsigned value."""
    return 128 - count_leading_zeros128(x)