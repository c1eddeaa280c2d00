"""High-probability bounds on the size of NTT polynomials.

Each bound is 6 * sqrt(V), where V is the variance of an NTT coefficient.
The estimates are only accurate when the plaintext modulus fits in 64 bits.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rlwe.bits import UINT64_MASK
from rlwe.constants import MAX_VARIANCE


@dataclass(frozen=True)
class ErrorParams:
    """Error constants for a plaintext modulus t = 2^log_t + 1."""

    t: int
    log_modulus: int
    dimension: int
    sigma: float
    b_plaintext: float
    b_encryption: float
    b_scale: float

    @classmethod
    def create(
        cls, log_t: int, variance: int, log_modulus: int, dimension: int
    ) -> ErrorParams:
        """Validate the parameters and compute the error constants."""
        if log_t > log_modulus - 1:
            raise ValueError(
                f"The value log_t, {log_t}, must be smaller than "
                f"log_modulus - 1, {log_modulus - 1}."
            )
        if log_t <= 0:
            raise ValueError(f"The value log_t, {log_t}, must be positive.")
        if variance > MAX_VARIANCE:
            raise ValueError(
                f"The variance, {variance}, must be at most {MAX_VARIANCE}."
            )

        t = (1 << log_t) + 1
        t_float = float(t & UINT64_MASK)
        sigma = math.sqrt(variance)
        return cls(
            t=t,
            log_modulus=log_modulus,
            dimension=dimension,
            sigma=sigma,
            # Plaintext coefficients uniform in [0, t): variance t^2 / 12 each.
            b_plaintext=t_float * math.sqrt(3.0 * dimension),
            # Fresh encryption |m + e t| with error variance sigma^2.
            b_encryption=t_float
            * math.sqrt(dimension)
            * (math.sqrt(3.0) + 6.0 * sigma),
            # Rounding polynomial added during modulus switching.
            b_scale=t_float
            * (math.sqrt(3.0 * dimension) + 8.0 * dimension * math.sqrt(1 / 3.0)),
        )

    @property
    def _t_as_float(self) -> float:
        return float(self.t & UINT64_MASK)

    def b_relinearize(self, log_decomposition_modulus: int) -> float:
        """Error added by relinearization with decomposition modulus 2^log."""
        num_digits = (
            log_decomposition_modulus + self.log_modulus - 1
        ) // log_decomposition_modulus
        decomposition_modulus = 1 << log_decomposition_modulus
        return (
            (8.0 / math.sqrt(3.0))
            * self._t_as_float
            * num_digits
            * self.sigma
            * self.dimension
            * decomposition_modulus
        )