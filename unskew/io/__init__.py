"""Data generation utilities."""

from unskew.config import GaussianMixtureConfig, SyntheticDataConfig
from unskew.io.synthetic_generator import SyntheticGenerator

__all__ = [
    "GaussianMixtureConfig",
    "SyntheticDataConfig",
    "SyntheticGenerator",
]
