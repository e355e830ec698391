"""
Base58 integer codec.

Converts between Base58 strings and non-negative integers using the Bitcoin
alphabet (no 0, O, I or l). This is the bare positional codec: there is no
leading-zero byte padding, no version byte and no checksum.

    decode("21") == 58
    encode(58) == "21"
    encode(0) == "1"
"""

from __future__ import annotations

# Base58 alphabet (same as Bitcoin)
ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_MAP = {char: i for i, char in enumerate(ALPHABET)}

BASE = len(ALPHABET)


class Base58Error(ValueError):
    """Raised for values that cannot be Base58 encoded or decoded."""

    pass


class InvalidCharacterError(Base58Error):
    """Raised when a string contains a character outside the Base58 alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid Base58 character: {char!r} at position {position}")


def decode(s: str) -> int:
    """
    Decode a Base58 string to an integer.

    Characters are consumed left to right, most significant first.

    Args:
        s: Base58 string

    Returns:
        int: the decoded non-negative integer (0 for an empty string)

    Raises:
        InvalidCharacterError: if any character is not in the alphabet
    """
    n = 0
    for position, char in enumerate(s):
        index = _ALPHABET_MAP.get(char)
        if index is None:
            raise InvalidCharacterError(char, position)
        n = n * BASE + index
    return n


def encode(n: int) -> str:
    """
    Encode a non-negative integer as a Base58 string.

    Zero encodes to the first alphabet symbol, "1".

    Raises:
        Base58Error: if n is negative
    """
    if n < 0:
        raise Base58Error(f"Cannot encode negative integer: {n}")
    if n == 0:
        return ALPHABET[0]

    result = []
    while n > 0:
        n, remainder = divmod(n, BASE)
        result.append(ALPHABET[remainder])
    result.reverse()
    return "".join(result)


def is_valid(s: str) -> bool:
    """Check if a string decodes without raising."""
    try:
        decode(s)
    except InvalidCharacterError:
        return False
    return True
