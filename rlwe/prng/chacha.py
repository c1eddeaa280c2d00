"""Pseudo-random number generators built on the ChaCha20 stream cipher.

The key stream is obtained by encrypting zeros. Each buffer holds
255 * 32 bytes; when it runs out the generator deterministically derives a
fresh buffer by bumping a salt counter carried in the nonce. For a fixed key
the output is always the same, so outputs can be replayed.
"""

from __future__ import annotations

import secrets
import threading

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from rlwe.bits import UINT64_MASK
from rlwe.prng.base import SecurePrng

CHACHA_KEY_BYTES_SIZE = 32
CHACHA_NONCE_SIZE = 12
CHACHA_OUTPUT_BYTES = 255 * 32

_SALT_PREFIX = b"salt"


def chacha_resalt(
    key: bytes, salt_counter: int, buffer_size: int = CHACHA_OUTPUT_BYTES
) -> bytes:
    """Return ``buffer_size`` key-stream bytes for ``key`` and a salt counter.

    The 12-byte nonce is ``b"salt"`` followed by the counter as 8
    little-endian bytes; the ChaCha20 block counter starts at zero.
    """
    nonce = _SALT_PREFIX + (salt_counter & UINT64_MASK).to_bytes(8, "little")
    if len(nonce) != CHACHA_NONCE_SIZE:
        raise RuntimeError("The salt length is incorrect.")
    block_counter = (0).to_bytes(4, "little")
    cipher = Cipher(algorithms.ChaCha20(bytes(key), block_counter + nonce), mode=None)
    return cipher.encryptor().update(bytes(buffer_size))


def generate_chacha_key() -> bytes:
    """Return a fresh random key suitable for seeding a ChaCha generator."""
    return secrets.token_bytes(CHACHA_KEY_BYTES_SIZE)


class SingleThreadChaChaPrng(SecurePrng):
    """ChaCha20-based generator for use from a single thread."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != CHACHA_KEY_BYTES_SIZE:
            raise ValueError(
                "Cannot create Prng with key of the wrong size. Real key "
                f"length of {len(key)} instead of expected key length of "
                f"{CHACHA_KEY_BYTES_SIZE}."
            )
        self._key = key
        self._salt_counter = 0
        self._buffer = b""
        self._position = 0
        self._resalt()

    def _resalt(self) -> None:
        self._buffer = chacha_resalt(self._key, self._salt_counter, CHACHA_OUTPUT_BYTES)
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
        return generate_chacha_key()

    @staticmethod
    def seed_length() -> int:
        """Return the expected seed length in bytes."""
        return CHACHA_KEY_BYTES_SIZE


class ChaChaPrng(SingleThreadChaChaPrng):
    """Thread-safe ChaCha20-based generator."""

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


SingleThreadPrng = SingleThreadChaChaPrng
Prng = ChaChaPrng