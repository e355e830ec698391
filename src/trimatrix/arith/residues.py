"""Residue reduction over a fixed modulus set."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_MODULI: tuple[int, ...] = (1000000007, 1000000009, 1000000021)
"""Three distinct primes near 10^9; pairwise coprime by construction."""


def reduce(n: int, moduli: Sequence[int] = DEFAULT_MODULI) -> list[int]:
    """Return [n % m for m in moduli], in modulus order."""
    return [n % m for m in moduli]
