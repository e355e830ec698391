"""
Unit tests for trimatrix.arith — residue reduction, modular inverse, CRT.

All tests are pure integer math.
"""

import math
import secrets

import pytest

from trimatrix.arith.crt import (
    NotInvertibleError,
    are_pairwise_coprime,
    mod_inverse,
    moduli_product,
    reconstruct,
)
from trimatrix.arith.residues import DEFAULT_MODULI, reduce


def _random_below(limit: int) -> int:
    return secrets.randbelow(limit)


# ==============================================================================
# reduce
# ==============================================================================


class TestReduce:

    def test_elementwise(self):
        assert reduce(52, [3, 5, 7]) == [1, 2, 3]

    def test_preserves_order(self):
        assert reduce(52, [7, 5, 3]) == [3, 2, 1]

    def test_default_moduli(self):
        n = 10**20
        assert reduce(n) == [n % p for p in DEFAULT_MODULI]

    def test_below_every_modulus(self):
        assert reduce(42) == [42, 42, 42]


# ==============================================================================
# mod_inverse
# ==============================================================================


class TestModInverse:

    def test_known_values(self):
        assert mod_inverse(3, 11) == 4
        assert mod_inverse(10, 17) == 12
        assert mod_inverse(1, 7) == 1

    def test_modulus_one_is_zero(self):
        assert mod_inverse(5, 1) == 0
        assert mod_inverse(0, 1) == 0

    def test_result_in_range(self):
        for a in range(1, 97):
            inv = mod_inverse(a, 97)
            assert 0 <= inv < 97
            assert (a * inv) % 97 == 1

    def test_a_larger_than_m(self):
        assert (6 * mod_inverse(6, 5)) % 5 == 1

    def test_negative_a_reduced_first(self):
        assert mod_inverse(-1, 5) == 4
        assert mod_inverse(-3, 11) == mod_inverse(8, 11)
        assert (-7 * mod_inverse(-7, 97)) % 97 == 1

    def test_negative_multiple_of_m_rejected(self):
        with pytest.raises(NotInvertibleError):
            mod_inverse(-10, 5)

    def test_large_primes(self):
        for p in DEFAULT_MODULI:
            a = _random_below(p - 1) + 1
            assert (a * mod_inverse(a, p)) % p == 1

    def test_matches_builtin_pow(self):
        for a, m in [(7, 40), (17, 3120), (123456789, 1000000007)]:
            assert mod_inverse(a, m) == pow(a, -1, m)

    @pytest.mark.parametrize("a,m", [(2, 4), (6, 9), (5, 5), (0, 7)])
    def test_not_coprime_rejected(self, a, m):
        with pytest.raises(NotInvertibleError):
            mod_inverse(a, m)

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match=">= 1"):
            mod_inverse(3, 0)


# ==============================================================================
# reconstruct
# ==============================================================================


class TestReconstruct:

    def test_small_moduli_exhaustive(self):
        moduli = [3, 5, 7]
        for n in range(moduli_product(moduli)):
            assert reconstruct(reduce(n, moduli), moduli) == n

    def test_default_moduli_random(self):
        limit = moduli_product(DEFAULT_MODULI)
        for _ in range(50):
            n = _random_below(limit)
            assert reconstruct(reduce(n, DEFAULT_MODULI), DEFAULT_MODULI) == n

    def test_upper_boundary(self):
        n = moduli_product(DEFAULT_MODULI) - 1
        assert reconstruct(reduce(n, DEFAULT_MODULI), DEFAULT_MODULI) == n

    def test_value_above_product_wraps(self):
        """Only n mod M is recoverable."""
        m = moduli_product(DEFAULT_MODULI)
        assert reconstruct(reduce(m + 5, DEFAULT_MODULI), DEFAULT_MODULI) == 5

    def test_single_modulus(self):
        assert reconstruct([4], [9]) == 4

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="residues for"):
            reconstruct([1, 2], [3, 5, 7])

    def test_shared_factor_rejected(self):
        with pytest.raises(NotInvertibleError):
            reconstruct([1, 1], [4, 6])


class TestModuliHelpers:

    def test_product(self):
        assert moduli_product(DEFAULT_MODULI) == math.prod(DEFAULT_MODULI)
        assert moduli_product(DEFAULT_MODULI) > 10**27

    def test_default_moduli_coprime(self):
        assert are_pairwise_coprime(DEFAULT_MODULI)

    def test_shared_factor_detected(self):
        assert not are_pairwise_coprime([4, 9, 6])
