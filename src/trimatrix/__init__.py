"""
trimatrix: Base58 / trinary / Chinese Remainder Theorem round-trip toolkit.

Usage:
    from trimatrix import PipelineConfig, run_pipeline
    result = run_pipeline(PipelineConfig(code="3KMUV7snH6wU48zt"))
"""

from trimatrix.config import ConfigError, PipelineConfig
from trimatrix.core.models import PipelineResult, ResidueReport
from trimatrix.pipeline import print_report, run_pipeline

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "PipelineConfig",
    "PipelineResult",
    "ResidueReport",
    "print_report",
    "run_pipeline",
]
