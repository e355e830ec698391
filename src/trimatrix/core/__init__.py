"""core module init"""
from trimatrix.core.base58 import (
    ALPHABET,
    Base58Error,
    InvalidCharacterError,
    decode,
    encode,
    is_valid,
)
from trimatrix.core.models import PipelineResult, ResidueReport
from trimatrix.core.trinary import (
    MAX_TRINARY,
    TRINARY_WIDTH,
    fits,
    from_trinary,
    to_trinary,
)

__all__ = [
    "ALPHABET",
    "Base58Error",
    "InvalidCharacterError",
    "MAX_TRINARY",
    "PipelineResult",
    "ResidueReport",
    "TRINARY_WIDTH",
    "decode",
    "encode",
    "fits",
    "from_trinary",
    "is_valid",
    "to_trinary",
]
