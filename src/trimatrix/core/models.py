"""
Data models for pipeline results.
All integers are Python ints; pydantic serializes them exactly in JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class ResidueReport(BaseModel):
    """One residue and its rendered dot matrix."""
    index: int  # 1-based
    modulus: int
    residue: int
    cells: list[int] = Field(default_factory=list)


class PipelineResult(BaseModel):
    """Every intermediate value of one pipeline run."""
    code: str
    decoded: int
    trinary: list[int]
    moduli: list[int]
    residues: list[ResidueReport] = Field(default_factory=list)
    reconstructed: int
    restored: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def round_trip_ok(self) -> bool:
        """True when both the integer and the Base58 string came back unchanged."""
        return self.reconstructed == self.decoded and self.restored == self.code

    def to_summary(self) -> str:
        """One-line human-readable summary."""
        residues = ", ".join(f"r{r.index}={r.residue}" for r in self.residues)
        status = "ok" if self.round_trip_ok else "MISMATCH"
        return f"{self.code} -> {self.decoded} [{residues}] -> {self.restored} ({status})"
