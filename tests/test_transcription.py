import random

import pytest

from rlwe.transcription import transcribe_bits


def test_splits_byte_into_nibbles_least_significant_first():
    assert transcribe_bits([0x12], 8, 8, 4, 8, 8) == [0x2, 0x1]


def test_only_first_bits_are_taken():
    assert transcribe_bits([0xFF], 5, 8, 8, 8, 8) == [0x1F]


def test_same_width_is_identity():
    data = [0x01, 0xAB, 0x7F, 0x00]
    assert transcribe_bits(data, 32, 8, 8, 8, 8) == data


@pytest.mark.parametrize("small, large", [(3, 8), (1, 7), (5, 64), (13, 17)])
def test_round_trip(small, large):
    rng = random.Random(small * 100 + large)
    count = 37
    data = [rng.randrange(1 << small) for _ in range(count)]
    bit_count = count * small
    packed = transcribe_bits(data, bit_count, small, large)
    assert len(packed) == -(-bit_count // large)
    assert all(0 <= value < (1 << large) for value in packed)
    assert transcribe_bits(packed, bit_count, large, small) == data


def test_total_set_bits_are_preserved():
    rng = random.Random(7)
    data = [rng.randrange(1 << 64) for _ in range(10)]
    out = transcribe_bits(data, 640, 64, 9)
    assert sum(v.bit_count() for v in out) == sum(v.bit_count() for v in data)


def test_empty_input_with_zero_length():
    assert transcribe_bits([], 0, 8, 4) == []


def test_non_empty_input_with_zero_length_fails():
    with pytest.raises(ValueError, match="Cannot transcribe an empty output vector"):
        transcribe_bits([1], 0, 8, 4)


def test_negative_length_fails():
    with pytest.raises(ValueError, match="The input bit length, -1, cannot be negative."):
        transcribe_bits([1], -1, 8, 4)


def test_input_too_small_fails():
    with pytest.raises(ValueError, match="The input vector of size 1 is too small to contain 9 bits."):
        transcribe_bits([1], 9, 8, 4)


def test_input_bits_exceed_type_fails():
    with pytest.raises(ValueError, match="The input type only contains 8 bits"):
        transcribe_bits([1], 8, 9, 4, 8, 8)


def test_output_bits_exceed_type_fails():
    with pytest.raises(ValueError, match="The output type only contains 8 bits"):
        transcribe_bits([1], 8, 8, 9, 8, 8)