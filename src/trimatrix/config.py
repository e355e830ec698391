"""
Run configuration for the trimatrix pipeline.

The defaults reproduce the fixed demonstration run. The CLI overrides
`code` and `grid`; moduli and width are only changed programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass

from trimatrix.arith.crt import are_pairwise_coprime
from trimatrix.arith.residues import DEFAULT_MODULI
from trimatrix.core.trinary import TRINARY_WIDTH

DEFAULT_CODE = "3KMUV7snH6wU48zt"


class ConfigError(ValueError):
    """Raised when a PipelineConfig cannot drive a correct reconstruction."""
    pass


@dataclass
class PipelineConfig:
    """
    Parameters of a single pipeline run.

    Args:
        code:           Base58 input string
        moduli:         pairwise-coprime CRT moduli, also used for rendering
        trinary_width:  number of base-3 digits in the packed vector
        grid:           print matrices as three rows instead of one line
    """
    code: str = DEFAULT_CODE
    moduli: tuple[int, ...] = DEFAULT_MODULI
    trinary_width: int = TRINARY_WIDTH
    grid: bool = False

    def validate(self) -> None:
        """Raise ConfigError if the moduli or width are unusable."""
        if not self.moduli:
            raise ConfigError("At least one modulus is required.")
        if any(m < 1 for m in self.moduli):
            raise ConfigError(f"Moduli must be positive: {list(self.moduli)}")
        if not are_pairwise_coprime(self.moduli):
            raise ConfigError(f"Moduli are not pairwise coprime: {list(self.moduli)}")
        if self.trinary_width < 1:
            raise ConfigError(f"Trinary width must be >= 1, got {self.trinary_width}")
