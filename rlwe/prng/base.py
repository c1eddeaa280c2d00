"""Interface shared by the secure pseudo-random number generators."""

from __future__ import annotations

import abc


class SecurePrng(abc.ABC):
    """A secure pseudo-random number generator producing bytes and words."""

    @abc.abstractmethod
    def rand8(self) -> int:
        """Return 8 bits of randomness as an integer in [0, 256)."""

    def rand64(self) -> int:
        """Return 64 bits of randomness built from eight bytes, low byte first."""
        return int.from_bytes(bytes(self.rand8() for _ in range(8)), "little")