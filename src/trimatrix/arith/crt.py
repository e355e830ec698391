"""
Chinese Remainder Theorem reconstruction.

Provides:
- mod_inverse: multiplicative inverse via the iterative extended Euclidean algorithm
- reconstruct: recombine residues into the unique integer modulo prod(moduli)
- moduli_product / are_pairwise_coprime: helpers for validating a modulus set

Mathematical foundation:
    Given pairwise-coprime m_1..m_k with M = m_1 * ... * m_k and residues r_i,
    the unique x in [0, M) with x ≡ r_i (mod m_i) is

        x = Σ r_i · M_i · inv(M_i mod m_i, m_i)  (mod M),   M_i = M / m_i

Python integers are arbitrary precision, so the intermediate products r_i·M_i
never wrap.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

logger = logging.getLogger("trimatrix.crt")


class NotInvertibleError(ValueError):
    """Raised when a has no inverse modulo m (gcd(a, m) != 1)."""

    pass


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the inverse of a modulo m with the extended Euclidean algorithm.

    Args:
        a: value to invert, reduced modulo m first
        m: modulus, m >= 1

    Returns:
        int: x in [0, m) with (a * x) % m == 1, or 0 when m == 1

    Raises:
        ValueError: if m < 1
        NotInvertibleError: if a and m share a factor
    """
    if m < 1:
        raise ValueError(f"Modulus must be >= 1, got {m}")
    if m == 1:
        return 0

    a %= m
    m0 = m
    x0, x1 = 0, 1

    while a > 1:
        if m == 0:
            # Remainder chain ended at gcd(a, m0) = a > 1
            raise NotInvertibleError(f"{a} divides both operands; no inverse modulo {m0}")
        q = a // m
        a, m = m, a % m
        x0, x1 = x1 - q * x0, x0

    if a == 0:
        raise NotInvertibleError(f"0 has no inverse modulo {m0}")

    if x1 < 0:
        x1 += m0
    return x1


def moduli_product(moduli: Sequence[int]) -> int:
    """Product of the moduli, i.e. the size of the CRT reconstruction range."""
    return math.prod(moduli)


def are_pairwise_coprime(moduli: Sequence[int]) -> bool:
    """Check gcd(m_i, m_j) == 1 for every distinct pair."""
    for i, a in enumerate(moduli):
        for b in moduli[i + 1:]:
            if math.gcd(a, b) != 1:
                return False
    return True


def reconstruct(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """
    Recombine residues into the unique integer in [0, prod(moduli)).

    Moduli must be pairwise coprime. Given that, for any 0 <= n < prod(moduli):
        reconstruct(reduce(n, moduli), moduli) == n

    Raises:
        ValueError: if residues and moduli differ in length
        NotInvertibleError: if two moduli share a factor
    """
    if len(residues) != len(moduli):
        raise ValueError(
            f"Got {len(residues)} residues for {len(moduli)} moduli"
        )

    m_product = moduli_product(moduli)
    result = 0
    for r_i, m_i in zip(residues, moduli):
        mi = m_product // m_i
        inv = mod_inverse(mi % m_i, m_i)
        result = (result + r_i * mi % m_product * inv % m_product) % m_product
        logger.debug(f"CRT term m={m_i} r={r_i} inv={inv} -> partial {result}")
    return result
