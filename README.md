# rlwe

Building blocks for a Ring-LWE encryption scheme:

- `rlwe.bits`: population counts (`count_ones_in_byte`, `count_ones64`), leading-zero counts (`count_leading_zeros64`, `count_leading_zeros128`) and `bit_length` for 128-bit values.
- `rlwe.constants`: moduli and degree bounds, such as `NEWHOPE_MODULUS`, `MODULUS_59`, `MODULUS_80`, `MAX_NUM_COEFFS` and `MAX_VARIANCE`.
- `rlwe.error_params`: `ErrorParams`, the high-probability noise bounds for plaintexts, fresh encryptions, modulus switching and relinearization.
- `rlwe.transcription`: `transcribe_bits`, which repacks a message stored in j-bit chunks into k-bit chunks.
- `rlwe.prng.base`: `SecurePrng`, the abstract interface with `rand8()` and `rand64()`.
- `rlwe.prng.chacha`: deterministic, replayable generators built on ChaCha20 (`ChaChaPrng`, `SingleThreadChaChaPrng`), plus `chacha_resalt` and `generate_chacha_key`.
- `rlwe.prng.hkdf`: the same on HKDF-SHA256 (`HkdfPrng`, `SingleThreadHkdfPrng`), plus `hkdf_resalt` and `generate_hkdf_key`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Pseudorandom generators

A generator is created from a seed of exactly `seed_length()` bytes (32 for ChaCha20,
64 for HKDF). The same seed always gives the same output stream, so a seed can be shared
to replay randomness. Output is drawn from a buffer of 255 * 32 bytes; when it is used up
a new buffer is derived deterministically from the key and an incremented salt counter.

```python
from rlwe.prng.chacha import ChaChaPrng, SingleThreadChaChaPrng

seed = SingleThreadChaChaPrng.generate_seed()
prng = ChaChaPrng(seed)
replay = ChaChaPrng(seed)

assert prng.rand8() == replay.rand8()
assert prng.rand64() == replay.rand64()
```

`rand8()` returns an integer in `[0, 256)`; `rand64()` builds a 64-bit integer from the next
eight bytes, the first byte least significant.

`ChaChaPrng` and `HkdfPrng` guard their state with a lock and are safe to share between
threads. The `SingleThread` variants do no locking and are meant for one thread. A seed of
the wrong length raises `ValueError`.

```python
from rlwe.prng.hkdf import HkdfPrng, SingleThreadHkdfPrng

prng = HkdfPrng(SingleThreadHkdfPrng.generate_seed())
value = prng.rand64()
```

## Error bounds

```python
from rlwe.error_params import ErrorParams

params = ErrorParams.create(log_t=1, variance=8, log_modulus=14, dimension=1024)
print(params.b_plaintext, params.b_encryption, params.b_scale)
print(params.b_relinearize(2))
```

The plaintext modulus is `t = 2**log_t + 1`. A `log_t` that is not positive or is larger
than `log_modulus - 1`, or a variance above `MAX_VARIANCE` (256), raises `ValueError`.

## Bit transcription

```python
from rlwe.transcription import transcribe_bits

# Two 4-bit chunks repacked as one 8-bit chunk, in 8-bit integer types.
transcribe_bits([0x3, 0xA], 8, 4, 8, 8, 8)  # [0xA3]
```

The last two arguments are the widths of the integer types holding input and output
chunks; both default to 64. Chunk sizes wider than those types, a negative bit length, or
an input vector too short for the requested bits raise `ValueError`.

## What this package does not do

It has no polynomial arithmetic, number-theoretic transform, key sampling, encryption,
decryption or relinearization keys. `ErrorParams` takes the modulus bit length and the
polynomial dimension as plain integers rather than from modulus or transform objects.

## Running the tests

```
pytest
```