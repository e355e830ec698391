"""
3×3 dot-matrix rendering of residues.

A residue r marks two cells of a 9-cell row-major grid:
    first_pos  = r % 9
    second_pos = (r // 9) % 9
When the two positions coincide only one cell is marked.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

CELL_COUNT = 9
ROW_LENGTH = 3


@dataclass(frozen=True)
class DotMatrix:
    """
    A 3×3 grid of 0/1 cells, stored row-major.

    Attributes:
        cells: 9 values in {0, 1}.
    """
    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(self.cells)}")

    @property
    def rows(self) -> list[tuple[int, ...]]:
        return [self.cells[i:i + ROW_LENGTH] for i in range(0, CELL_COUNT, ROW_LENGTH)]

    def count(self) -> int:
        """Number of marked cells (1 or 2 for a rendered residue)."""
        return sum(self.cells)

    def __str__(self) -> str:
        return "".join(str(cell) for cell in self.cells)


def positions(residue: int) -> tuple[int, int]:
    """Return (first_pos, second_pos) for a residue."""
    return residue % CELL_COUNT, (residue // CELL_COUNT) % CELL_COUNT


def render(residue: int) -> DotMatrix:
    """Mark the two cells selected by the residue in an empty grid."""
    cells = [0] * CELL_COUNT
    first_pos, second_pos = positions(residue)
    cells[first_pos] = 1
    cells[second_pos] = 1
    return DotMatrix(tuple(cells))


def format_grid(matrix: DotMatrix) -> str:
    """Three-line form of the matrix, one row per line."""
    return "\n".join("".join(str(cell) for cell in row) for row in matrix.rows)


def display(matrix: DotMatrix, stream: TextIO | None = None) -> None:
    """Write the 9 cells on one line with no separators."""
    print(matrix, file=stream or sys.stdout)
