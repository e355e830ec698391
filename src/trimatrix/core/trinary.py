"""
Fixed-width base-3 digit vectors.

Digits are stored most-significant first. The width is fixed (60 by default),
so integers at or above 3**width keep only their low-order digits.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("trimatrix.trinary")

TRINARY_WIDTH = 60
"""Number of base-3 digits in a packed vector."""

MAX_TRINARY = 3**TRINARY_WIDTH - 1
"""Largest integer that survives a round trip at the default width."""


def fits(n: int, width: int = TRINARY_WIDTH) -> bool:
    """Check whether n round-trips through a width-digit vector unchanged."""
    return 0 <= n < 3**width


def to_trinary(n: int, width: int = TRINARY_WIDTH) -> list[int]:
    """
    Pack an integer into exactly `width` base-3 digits, most significant first.

    Args:
        n: non-negative integer
        width: number of digits (default 60)

    Returns:
        list[int]: digits in {0, 1, 2}, len == width

    Note:
        n >= 3**width is truncated to its low-order digits. A warning is
        logged, but no error is raised.
    """
    if n < 0:
        raise ValueError(f"Cannot pack negative integer: {n}")
    if not fits(n, width):
        logger.warning(f"{n} does not fit in {width} trinary digits; high-order digits dropped")

    digits = [0] * width
    for i in range(width - 1, -1, -1):
        n, digits[i] = divmod(n, 3)
    return digits


def from_trinary(digits: list[int]) -> int:
    """
    Unpack a most-significant-first base-3 digit vector.

    Raises:
        ValueError: if a digit is outside {0, 1, 2}
    """
    acc = 0
    for digit in digits:
        if digit not in (0, 1, 2):
            raise ValueError(f"Invalid trinary digit: {digit}")
        acc = acc * 3 + digit
    return acc
