"""
trimatrix.arith — Modular arithmetic for residue reduction and CRT reconstruction.

Provides:
- reduce: residues of an integer over a modulus set
- mod_inverse: extended Euclidean inverse
- reconstruct: Chinese Remainder Theorem recombination
"""

from trimatrix.arith.crt import (
    NotInvertibleError,
    are_pairwise_coprime,
    mod_inverse,
    moduli_product,
    reconstruct,
)
from trimatrix.arith.residues import DEFAULT_MODULI, reduce

__all__ = [
    # Residues
    "DEFAULT_MODULI",
    "reduce",
    # CRT
    "NotInvertibleError",
    "are_pairwise_coprime",
    "mod_inverse",
    "moduli_product",
    "reconstruct",
]
