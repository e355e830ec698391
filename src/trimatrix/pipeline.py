"""
The Base58 → trinary → residues → CRT → Base58 pipeline.

run_pipeline() performs the computation and returns a PipelineResult;
print_report() writes the line-oriented console report.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from trimatrix.arith.crt import moduli_product, reconstruct
from trimatrix.arith.residues import reduce
from trimatrix.config import PipelineConfig
from trimatrix.core import base58
from trimatrix.core.models import PipelineResult, ResidueReport
from trimatrix.core.trinary import from_trinary, to_trinary
from trimatrix.render.matrix import DotMatrix, display, format_grid, render

logger = logging.getLogger("trimatrix.pipeline")


def run_pipeline(config: PipelineConfig | None = None) -> PipelineResult:
    """
    Run every stage once and collect the intermediate values.

    Raises:
        ConfigError: if the config fails validation
        InvalidCharacterError: if the input is not valid Base58
    """
    config = config or PipelineConfig()
    config.validate()

    decoded = base58.decode(config.code)
    logger.debug(f"Decoded {config.code!r} -> {decoded}")

    trinary = to_trinary(decoded, config.trinary_width)
    n = from_trinary(trinary)

    if n >= moduli_product(config.moduli):
        logger.warning(
            f"{n} exceeds the moduli product {moduli_product(config.moduli)}; "
            "reconstruction will differ"
        )

    residues = reduce(n, config.moduli)
    reports = [
        ResidueReport(
            index=i,
            modulus=m,
            residue=r,
            cells=list(render(r).cells),
        )
        for i, (m, r) in enumerate(zip(config.moduli, residues), start=1)
    ]
    logger.debug(f"Residues: {residues}")

    reconstructed = reconstruct(residues, config.moduli)
    restored_int = from_trinary(to_trinary(reconstructed, config.trinary_width))
    restored = base58.encode(restored_int)
    logger.debug(f"Reconstructed {reconstructed} -> {restored!r}")

    return PipelineResult(
        code=config.code,
        decoded=decoded,
        trinary=trinary,
        moduli=list(config.moduli),
        residues=reports,
        reconstructed=reconstructed,
        restored=restored,
    )


def print_report(result: PipelineResult, grid: bool = False, stream: TextIO | None = None) -> None:
    """Write the human-readable report for a pipeline result."""
    out = stream or sys.stdout
    print(f"Decoded integer: {result.decoded}", file=out)
    for report in result.residues:
        print(f"r{report.index} ({report.residue}):", file=out)
        matrix = DotMatrix(tuple(report.cells))
        if grid:
            print(format_grid(matrix), file=out)
        else:
            display(matrix, out)
    print(f"Reconstructed integer: {result.reconstructed}", file=out)
    print(f"Restored Base58: {result.restored}", file=out)
