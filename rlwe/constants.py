"""Moduli and bounds used to parametrise the Ring-LWE scheme.

Moduli are primes of the form q = p * 2^(N+1) + 1 so that NTT transforms on
polynomials of degree 2^N are possible; N is the log degree bound.
"""

# Parameters from the New Hope key exchange protocol.
NEWHOPE_MODULUS = 12289
NEWHOPE_LOG_DEGREE_BOUND = 10
NEWHOPE_DEGREE_BOUND = 1 << NEWHOPE_LOG_DEGREE_BOUND

# Montgomery parameters for a 59-bit modulus.
MODULUS_59 = 332366567264636929
INV_MODULUS_59 = 7124357790306815999
LOG_DEGREE_BOUND_59 = 10
DEGREE_BOUND_59 = 1 << LOG_DEGREE_BOUND_59

# Parameters for a 44-bit modulus.
MODULUS_44 = 17592169240577
LOG_DEGREE_BOUND_44 = 10
DEGREE_BOUND_44 = 1 << LOG_DEGREE_BOUND_44

# 25-bit and 29-bit moduli, both congruent to 4 modulo 5, for modulus switching.
MODULUS_29 = 463187969
LOG_DEGREE_BOUND_29 = 10
DEGREE_BOUND_29 = 1 << LOG_DEGREE_BOUND_29
MODULUS_25 = 33538049
LOG_DEGREE_BOUND_25 = 10
DEGREE_BOUND_25 = 1 << LOG_DEGREE_BOUND_25

# Parameters for an 80-bit modulus (646119422561999443726337).
MODULUS_80 = (35026 << 64) | 3764636248688824321
LOG_DEGREE_BOUND_80 = 11
DEGREE_BOUND_80 = 1 << LOG_DEGREE_BOUND_80

MAX_NUM_COEFFS = 1 << 15
MAX_LOG_NUM_COEFFS = 15
MAX_VARIANCE = 256