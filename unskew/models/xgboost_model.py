"""
XGBoost model wrapper, the default base learner.

Provides a simple interface for XGBoost binary classification that the
unskewed sampling meta-learner can seed and query for measures.
"""

from __future__ import annotations

from typing import List

import numpy as np
import xgboost as xgb
from sklearn.model_selection import train_test_split

from unskew.config import XGBoostConfig
from unskew.models.base import Capabilities


class XGBoostModel:
    """XGBoost binary classifier wrapper.

    Wraps xgboost.XGBClassifier with a simplified interface. Outputs
    the probability of the positive class (y=1).

    Uses early stopping on validation log loss when there is enough data,
    which keeps heavily duplicated resampled sets from overfitting. A
    training set holding a single class (one sampling ratio set to 0)
    yields a constant predictor instead of a booster.
    """

    def __init__(self, cfg: XGBoostConfig | None = None) -> None:
        self.cfg = cfg or XGBoostConfig()
        self._model: xgb.XGBClassifier | None = None
        self._constant: float | None = None

    def capabilities(self) -> Capabilities:
        # XGBoost routes NaN through learned default directions
        return Capabilities(missing_features=True, min_instances=1)

    def set_random_seed(self, seed: int) -> None:
        """Set the seed used for row/column subsampling and the validation split."""
        self.cfg = self.cfg.model_copy(update={"random_seed": int(seed)})

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        """Train the model on labeled data with early stopping.

        Args:
            X: Feature matrix of shape (n_samples, n_features).
            y: Binary labels of shape (n_samples,), 0 or 1.
        """
        self._model = None
        self._constant = None
        classes, counts = np.unique(y, return_counts=True)
        if len(classes) == 1:
            self._constant = float(classes[0])
            return

        self._model = xgb.XGBClassifier(
            n_estimators=self.cfg.n_estimators,
            max_depth=self.cfg.max_depth,
            learning_rate=self.cfg.learning_rate,
            subsample=self.cfg.subsample,
            colsample_bytree=self.cfg.colsample_bytree,
            random_state=self.cfg.random_seed,
            objective="binary:logistic",
            eval_metric="logloss",
            early_stopping_rounds=self.cfg.early_stopping_rounds,
        )

        # Split data for early stopping validation
        if len(X) > 50 and self.cfg.validation_fraction > 0 and counts.min() >= 2:
            X_train, X_val, y_train, y_val = train_test_split(
                X, y,
                test_size=self.cfg.validation_fraction,
                random_state=self.cfg.random_seed,
                stratify=y,
            )
            self._model.fit(
                X_train, y_train,
                eval_set=[(X_val, y_val)],
                verbose=False,
            )
        else:
            # Not enough data for split, train without early stopping
            self._model.set_params(early_stopping_rounds=None)
            self._model.fit(X, y)

    def _check_fitted(self) -> None:
        if self._model is None and self._constant is None:
            raise RuntimeError("Model has not been fitted. Call fit() first.")

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Return probability of the positive class for each row.

        Args:
            X: Feature matrix of shape (n_samples, n_features).

        Returns:
            Array of shape (n_samples,) with P(y=1|X).

        Raises:
            RuntimeError: If model has not been fitted.
        """
        self._check_fitted()
        if self._constant is not None:
            return np.full(len(X), self._constant)
        # XGBClassifier.predict_proba returns (n_samples, 2) for binary
        return self._model.predict_proba(X)[:, 1]

    def enumerate_measures(self) -> List[str]:
        return ["n_trees", "best_iteration"]

    def get_measure(self, name: str) -> float:
        """Return a named measure of the fitted booster."""
        self._check_fitted()
        if self._constant is not None and name in self.enumerate_measures():
            return 0.0 if name == "n_trees" else -1.0
        if name == "n_trees":
            return float(self._model.get_booster().num_boosted_rounds())
        if name == "best_iteration":
            if self._model.get_params().get("early_stopping_rounds") is None:
                return float(self._model.get_booster().num_boosted_rounds() - 1)
            return float(self._model.best_iteration)
        raise ValueError(f"Unknown measure: {name}. Supported: {self.enumerate_measures()}")

    def __str__(self) -> str:
        if self._model is None and self._constant is None:
            return "XGBoostModel (not fitted)"
        if self._constant is not None:
            return f"XGBoostModel (constant P(y=1)={self._constant:g})"
        return (
            f"XGBoostModel(max_depth={self.cfg.max_depth}, "
            f"learning_rate={self.cfg.learning_rate}, "
            f"n_trees={int(self.get_measure('n_trees'))})"
        )
