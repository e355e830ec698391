"""render module init"""
from trimatrix.render.matrix import DotMatrix, display, format_grid, positions, render

__all__ = [
    "DotMatrix",
    "display",
    "format_grid",
    "positions",
    "render",
]
