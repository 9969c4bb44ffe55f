"""
Configuration management using pydantic.

All config classes use pydantic for validation and YAML loading.
Config files are stored in configs/ directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from unskew.sampling.resampler import SampleConfig


# Base path for config files
CONFIGS_DIR = Path(__file__).parent.parent / "configs"


def load_yaml(path: Path | str) -> dict[str, Any]:
    """Load a YAML file and return as dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class GaussianMixtureConfig(BaseModel):
    """Configuration for Gaussian mixture components."""

    mu_majority_base: List[float] = Field(default=[0.0, 0.0])
    mu_minority_base: List[float] = Field(default=[1.5, 1.0])
    component_offset: float = 1.0
    sigma_max: float = 1.0


class SyntheticDataConfig(BaseModel):
    """Configuration for imbalanced synthetic data generation."""

    random_seed: int = 42
    n_features: int = 2
    n_components: int = 2
    minority_rate: float = Field(default=0.1, gt=0.0, lt=1.0)
    n_samples: int = 2000
    n_holdout: int = 2000
    gaussian_mixture: GaussianMixtureConfig = Field(
        default_factory=GaussianMixtureConfig
    )

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> SyntheticDataConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/synthetic_data.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "synthetic_data.yaml"
        return cls(**load_yaml(path))


class XGBoostConfig(BaseModel):
    """Configuration for XGBoost model.

    Defaults favour small resampled training sets.
    """

    n_estimators: int = 100
    max_depth: int = 3
    learning_rate: float = 0.1
    subsample: float = 0.8
    colsample_bytree: float = 0.8
    early_stopping_rounds: int = 10
    validation_fraction: float = 0.2  # Fraction of training data for early stopping
    random_seed: int = 42

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> XGBoostConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/model_xgboost.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "model_xgboost.yaml"
        return cls(**load_yaml(path))


class UnskewedSamplingConfig(BaseModel):
    """Configuration for the unskewed sampling meta-learner.

    Ratios are multiples of each group's size, not percentages:
    minority_ratio=1.0 draws as many minority records as there are,
    majority_ratio=0.5 draws half as many majority records.

    Ratio bounds are enforced by SampleConfig, which raises InvalidRatio.
    """

    minority_ratio: float = 1.0
    majority_ratio: float = 0.5
    seed: int = 1
    minority_chance: Optional[float] = None  # Roughly balanced majority count
    base_learner: Literal["xgboost", "logistic_regression"] = "xgboost"
    learner_params: Dict[str, Any] = Field(default_factory=dict)  # Passed through to the learner config

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> UnskewedSamplingConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/unskewed_sampling.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "unskewed_sampling.yaml"
        return cls(**load_yaml(path))

    def to_sample_config(self) -> SampleConfig:
        """Build the immutable per-run sampling parameters."""
        return SampleConfig(
            minority_ratio=self.minority_ratio,
            majority_ratio=self.majority_ratio,
            seed=self.seed,
            minority_chance=self.minority_chance,
        )


class ExperimentConfig(BaseModel):
    """Configuration for multi-seed train/evaluate runs."""

    n_seeds: int = 10
    start_seed: int = 1
    test_fraction: float = 0.3
    metrics: List[str] = Field(default=["auc", "brier", "balanced_accuracy"])

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "ExperimentConfig":
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/experiment.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "experiment.yaml"
        return cls(**load_yaml(path))
