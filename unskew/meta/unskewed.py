"""
Unskewed sampling meta-learner.

Rebalances a binary-labeled training set before fitting a wrapped base
learner:

1. check the dataset against the learner's capabilities,
2. drop rows with a missing label,
3. split into minority and majority groups,
4. sample each group with replacement (minority_ratio, majority_ratio),
5. seed the learner from the same generator and fit it on the result.

Predictions come straight from the base learner, normalised to a two-class
distribution.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from unskew.config import UnskewedSamplingConfig
from unskew.data.dataset import Dataset
from unskew.models import build_base_learner
from unskew.models.base import BaseLearner, CapabilityChecker, MeasureProducer, Randomizable
from unskew.sampling.resampler import Resample, SampleConfig, resample
from unskew.sampling.stratifier import stratify

logger = logging.getLogger(__name__)


class UnskewedSamplingClassifier:
    """Meta-learner that samples minority and majority classes differently.

    Attributes:
        base_learner: The wrapped learner.
        cfg: Sampling configuration.
        resample_: Result of the last resampling run (None before fit).
        class_values_: Label domain seen during fit (None before fit).
    """

    def __init__(
        self,
        base_learner: Optional[BaseLearner] = None,
        cfg: Optional[UnskewedSamplingConfig] = None,
    ) -> None:
        self.cfg = cfg or UnskewedSamplingConfig()
        if base_learner is None:
            base_learner = build_base_learner(self.cfg.base_learner, self.cfg.learner_params)
        self.base_learner = base_learner
        self.resample_: Optional[Resample] = None
        self.class_values_: Optional[Tuple[Any, Any]] = None

    @property
    def sample_config(self) -> SampleConfig:
        return self.cfg.to_sample_config()

    def fit(self, dataset: Dataset) -> UnskewedSamplingClassifier:
        """Resample the dataset and train the base learner on it.

        Args:
            dataset: Training data. Rows with a missing label are ignored.

        Returns:
            Self for chaining.

        Raises:
            CapabilityViolation: If the learner cannot handle the dataset.
            InvalidRatio: If a configured ratio is negative.
            EmptyGroup: If a group with a non-zero target has no rows.
        """
        sample_cfg = self.sample_config

        CapabilityChecker(self.base_learner.capabilities()).check(dataset)

        labeled = dataset.drop_missing_labels()
        n_dropped = len(dataset) - len(labeled)
        if n_dropped:
            logger.info("Dropped %d row(s) with missing label", n_dropped)

        minority, majority = stratify(labeled)
        result = resample(labeled, minority, majority, sample_cfg)

        if isinstance(self.base_learner, Randomizable):
            self.base_learner.set_random_seed(result.learner_seed)
            logger.debug("Seeded base learner with %d", result.learner_seed)

        self.base_learner.fit(result.dataset.X, result.dataset.label_indices())

        self.resample_ = result
        self.class_values_ = dataset.class_values
        return self

    def _check_fitted(self) -> None:
        if self.resample_ is None:
            raise RuntimeError("Model has not been fitted. Call fit() first.")

    def predict_proba(self, X: np.ndarray | Dataset) -> np.ndarray:
        """Class distribution for each row.

        Args:
            X: Feature matrix (n_samples, n_features) or a Dataset.

        Returns:
            Array of shape (n_samples, 2), columns ordered as class_values_.
            Rows are normalised to sum to 1 unless they sum to 0.
        """
        self._check_fitted()
        if isinstance(X, Dataset):
            X = X.X

        proba = np.asarray(self.base_learner.predict_proba(X), dtype=np.float64)
        if proba.ndim == 1:
            proba = np.column_stack([1.0 - proba, proba])

        sums = proba.sum(axis=1, keepdims=True)
        return np.divide(proba, sums, out=proba.copy(), where=sums != 0)

    def predict(self, X: np.ndarray | Dataset) -> np.ndarray:
        """Most probable label value for each row."""
        proba = self.predict_proba(X)
        return np.asarray(self.class_values_)[np.argmax(proba, axis=1)]

    def enumerate_measures(self) -> List[str]:
        """Names of the base learner's additional measures, if it has any."""
        if isinstance(self.base_learner, MeasureProducer):
            return list(self.base_learner.enumerate_measures())
        return []

    def get_measure(self, name: str) -> float:
        """Forward a measure request to the base learner.

        Raises:
            ValueError: If the base learner does not produce measures.
        """
        if isinstance(self.base_learner, MeasureProducer):
            return self.base_learner.get_measure(name)
        raise ValueError("Additional measures not supported by base learner.")

    def __str__(self) -> str:
        if self.resample_ is None:
            return "UnskewedSampling: No model built yet."
        r = self.resample_
        return (
            f"UnskewedSampling (minority_ratio={self.cfg.minority_ratio}, "
            f"majority_ratio={self.cfg.majority_ratio}, seed={self.cfg.seed})\n"
            f"  drew {r.minority_target} minority (label={r.minority_label!r}) + "
            f"{r.majority_target} majority (label={r.majority_label!r})\n\n"
            f"Base learner:\n\n{self.base_learner}\n"
        )
