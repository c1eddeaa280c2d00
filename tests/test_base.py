from collections.abc import Iterable

import pytest

from rlwe.prng.base import SecurePrng


class _FixedBytesPrng(SecurePrng):
    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)

    def rand8(self) -> int:
        return next(self._values)


def test_secure_prng_is_abstract():
    class Incomplete(SecurePrng):
        pass

    with pytest.raises(TypeError):
        SecurePrng()
    with pytest.raises(TypeError):
        Incomplete()
    assert SecurePrng.rand64(_FixedBytesPrng([0] * 8)) == 0


def test_rand64_combines_bytes_little_endian():
    prng = _FixedBytesPrng(range(1, 20))
    assert SecurePrng.rand64(prng) == 0x0807060504030201


def test_rand64_consumes_exactly_eight_bytes():
    prng = _FixedBytesPrng(range(1, 20))
    SecurePrng.rand64(prng)
    assert prng.rand8() == 9


def test_rand64_all_ones_is_max_word():
    prng = _FixedBytesPrng([0xFF] * 8)
    assert SecurePrng.rand64(prng) == (1 << 64) - 1


def test_rand64_all_zero_bytes():
    prng = _FixedBytesPrng([0] * 8)
    assert SecurePrng.rand64(prng) == 0