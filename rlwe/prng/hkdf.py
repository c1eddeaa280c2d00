"""Pseudo-random number generators built on HKDF with SHA-256.

HKDF extracts the entropy of the input key and expands it into
pseudo-random output. Each buffer holds 255 * 32 bytes, the most a single
SHA-256 HKDF expansion can produce. When it runs out, the generator
deterministically derives a fresh buffer using the salt ``"salt<counter>"``.
For a fixed key the output is always the same, so outputs can be replayed.
"""

from __future__ import annotations

import secrets
import threading

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from rlwe.prng.base import SecurePrng

HKDF_KEY_BYTES_SIZE = 64
HKDF_MAX_OUTPUT_BYTES = 255 * 32


def hkdf_resalt(
    key: bytes, salt_counter: int, buffer_size: int = HKDF_MAX_OUTPUT_BYTES
) -> bytes:
    """Return ``buffer_size`` HKDF-SHA256 bytes for ``key`` and a salt counter.

    The salt is the ASCII text ``"salt"`` followed by the decimal counter and
    the info string is empty.
    """
    salt = f"salt{salt_counter}".encode("ascii")
    kdf = HKDF(algorithm=hashes.SHA256(), length=buffer_size, salt=salt, info=b"")
    return kdf.derive(bytes(key))


def generate_hkdf_key() -> bytes:
    """Return a fresh random key suitable for seeding an HKDF generator."""
    return secrets.token_bytes(HKDF_KEY_BYTES_SIZE)


class SingleThreadHkdfPrng(SecurePrng):
    """HKDF-based generator for use from a single thread."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != HKDF_KEY_BYTES_SIZE:
            raise ValueError(
                "Cannot create Prng with key of the wrong size. Real key "
                f"length of {len(key)} instead of expected key length of "
                f"{HKDF_KEY_BYTES_SIZE}."
            )
        self._key = key
        self._salt_counter = 0
        self._buffer = b""
        self._position = 0
        self._resalt()

    def _resalt(self) -> None:
        self._buffer = hkdf_resalt(self._key, self._salt_counter, HKDF_MAX_OUTPUT_BYTES)
        self._salt_counter += 1
        self._position = 0

    def _next_byte(self) -> int:
        if self._position >= len(self._buffer):
            self._resalt()
        value = self._buffer[self._position]
        self._position += 1
        return value

    def rand8(self) -> int:
        """Return 8 bits of randomness."""
        return self._next_byte()

    def rand64(self) -> int:
        """Return 64 bits of randomness, first byte least significant."""
        return int.from_bytes(bytes(self._next_byte() for _ in range(8)), "little")

    @staticmethod
    def generate_seed() -> bytes:
        """Return a valid random seed for this generator."""
        return generate_hkdf_key()

    @staticmethod
    def seed_length() -> int:
        """Return the expected seed length in bytes."""
        return HKDF_KEY_BYTES_SIZE


class HkdfPrng(SingleThreadHkdfPrng):
    """Thread-safe HKDF-based generator."""

    def __init__(self, key: bytes) -> None:
        self._lock = threading.Lock()
        super().__init__(key)

    def rand8(self) -> int:
        """Return 8 bits of randomness."""
        with self._lock:
            return super().rand8()

    def rand64(self) -> int:
        """Return 64 bits of randomness, drawn atomically."""
        with self._lock:
            return super().rand64()