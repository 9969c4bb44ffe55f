"""
L1-regularized Logistic Regression model.

A light, linear alternative to the XGBoost base learner. A single-class
training set yields a constant predictor, since the solver needs both classes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

import numpy as np
from sklearn.linear_model import LogisticRegression

from unskew.models.base import Capabilities


@dataclass
class LogisticRegressionConfig:
    """Configuration for L1 Logistic Regression."""

    penalty: str = "l1"
    C: float = 1.0  # Inverse regularization strength
    solver: str = "saga"  # Required for L1 penalty
    max_iter: int = 1000
    random_seed: int = 42


class LogisticRegressionModel:
    """L1-regularized Logistic Regression base learner."""

    def __init__(self, cfg: LogisticRegressionConfig | None = None):
        """Initialize model with config.

        Args:
            cfg: Configuration. Uses defaults if None.
        """
        self.cfg = cfg or LogisticRegressionConfig()
        self._model = self._build()
        self._fitted = False
        self._constant: float | None = None

    def _build(self) -> LogisticRegression:
        return LogisticRegression(
            penalty=self.cfg.penalty,
            C=self.cfg.C,
            solver=self.cfg.solver,
            max_iter=self.cfg.max_iter,
            random_state=self.cfg.random_seed,
        )

    def capabilities(self) -> Capabilities:
        return Capabilities(missing_features=False, min_instances=1)

    def set_random_seed(self, seed: int) -> None:
        """Reseed the solver; takes effect on the next fit()."""
        self.cfg = replace(self.cfg, random_seed=int(seed))
        self._model = self._build()
        self._fitted = False

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        """Fit model on training data.

        Args:
            X: Feature matrix (n_samples, n_features).
            y: Binary labels (0 or 1).
        """
        classes = np.unique(y)
        if len(classes) == 1:
            self._constant = float(classes[0])
        else:
            self._constant = None
            self._model.fit(X, y)
        self._fitted = True

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Predict probability of the positive class (y=1).

        Args:
            X: Feature matrix (n_samples, n_features).

        Returns:
            Probability of class 1 for each sample.
        """
        if not self._fitted:
            raise RuntimeError("Model has not been fitted. Call fit() first.")
        if self._constant is not None:
            return np.full(len(X), self._constant)
        return self._model.predict_proba(X)[:, 1]

    def enumerate_measures(self) -> List[str]:
        return ["n_nonzero_coefs"]

    def get_measure(self, name: str) -> float:
        if not self._fitted:
            raise RuntimeError("Model has not been fitted. Call fit() first.")
        if name == "n_nonzero_coefs":
            if self._constant is not None:
                return 0.0
            return float(np.count_nonzero(self._model.coef_))
        raise ValueError(f"Unknown measure: {name}. Supported: {self.enumerate_measures()}")

    def __str__(self) -> str:
        if not self._fitted:
            return "LogisticRegressionModel (not fitted)"
        if self._constant is not None:
            return f"LogisticRegressionModel (constant P(y=1)={self._constant:g})"
        coefs = ", ".join(f"{c:.4f}" for c in self._model.coef_[0])
        return (
            f"LogisticRegressionModel(penalty={self.cfg.penalty}, C={self.cfg.C})\n"
            f"  intercept: {self._model.intercept_[0]:.4f}\n"
            f"  coefficients: [{coefs}]"
        )
