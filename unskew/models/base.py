"""
Base learner interfaces and the capability checker.

A base learner only has to fit on a feature matrix with 0/1 labels and
return class probabilities. Seeding and additional measures are optional
capabilities, expressed as runtime-checkable protocols so the meta-learner
can test for them without knowing the concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable

import numpy as np

from unskew.data.dataset import Dataset
from unskew.exceptions import CapabilityViolation


@dataclass(frozen=True)
class Capabilities:
    """What a base learner can handle.

    Attributes:
        missing_features: Whether NaN feature values are accepted.
        min_instances: Minimum number of labeled rows required to train.
    """

    missing_features: bool = False
    min_instances: int = 1


class BaseLearner(Protocol):
    """Learner that the meta-learner wraps."""

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        """Fit on features and 0/1 labels."""
        ...

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Return P(y=1) of shape (n,) or a distribution of shape (n, 2)."""
        ...

    def capabilities(self) -> Capabilities:
        ...


@runtime_checkable
class Randomizable(Protocol):
    """Learner whose internal randomness can be seeded."""

    def set_random_seed(self, seed: int) -> None:
        ...


@runtime_checkable
class MeasureProducer(Protocol):
    """Learner that exposes named additional measures after training."""

    def enumerate_measures(self) -> List[str]:
        ...

    def get_measure(self, name: str) -> float:
        ...


class CapabilityChecker:
    """Validates a dataset against a learner's capabilities before training."""

    def __init__(self, capabilities: Capabilities):
        self.capabilities = capabilities

    def check(self, dataset: Dataset) -> None:
        """Fail if the learner cannot be trained on this dataset.

        Args:
            dataset: Raw dataset, before missing labels are dropped.

        Raises:
            CapabilityViolation: On non-numeric or infinite features,
                unsupported missing feature values, or too few labeled rows.
        """
        X = dataset.X
        if not np.issubdtype(X.dtype, np.number):
            raise CapabilityViolation(
                f"Features must be numeric, got dtype {X.dtype}"
            )

        X = X.astype(np.float64, copy=False)
        if np.isinf(X).any():
            raise CapabilityViolation("Features contain infinite values")

        if not self.capabilities.missing_features and np.isnan(X).any():
            n_rows = int(np.isnan(X).any(axis=1).sum())
            raise CapabilityViolation(
                f"Base learner cannot handle missing feature values "
                f"({n_rows} row(s) affected)"
            )

        n_labeled = int((~dataset.missing_label_mask).sum())
        if n_labeled < self.capabilities.min_instances:
            raise CapabilityViolation(
                f"Need at least {self.capabilities.min_instances} labeled row(s), "
                f"got {n_labeled}"
            )
