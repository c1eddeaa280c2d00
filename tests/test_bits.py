import pytest

from rlwe.bits import (
    bit_length,
    count_leading_zeros64,
    count_leading_zeros128,
    count_ones64,
    count_ones_in_byte,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0xFF000000000000FF, 16),
        (0xFF000000000000FE, 15),
        (0xFF0000000000FF00, 16),
        (0x1111111111111111, 16),
        (0x0321212121212121, 16),
    ],
)
def test_count_ones64(value, expected):
    assert count_ones64(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x00, 0),
        (0x01, 1),
        (0x11, 2),
        (0x22, 2),
        (0x44, 2),
        (0xFF, 8),
        (0xEE, 6),
    ],
)
def test_count_ones_in_byte(value, expected):
    assert count_ones_in_byte(value) == expected


def test_count_leading_zeros64():
    value = 0x8000000000000000
    for i in range(64):
        assert count_leading_zeros64(value) == i
        value >>= 1


def test_count_leading_zeros64_of_zero():
    assert count_leading_zeros64(0) == 64


def test_count_leading_zeros128_spans_both_halves():
    value = 1 << 127
    for i in range(128):
        assert count_leading_zeros128(value) == i
        value >>= 1
    assert count_leading_zeros128(0) == 128


def test_bit_length():
    value = 0x8000000000000000 << 64
    for i in range(129):
        assert bit_length(value) == 128 - i
        value >>= 1