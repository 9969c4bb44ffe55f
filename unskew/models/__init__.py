"""Base learners for the unskewed sampling meta-learner."""

from __future__ import annotations

from typing import Any, Dict

from unskew.config import XGBoostConfig
from unskew.models.base import (
    BaseLearner,
    Capabilities,
    CapabilityChecker,
    MeasureProducer,
    Randomizable,
)
from unskew.models.logistic_regression import LogisticRegressionConfig, LogisticRegressionModel
from unskew.models.xgboost_model import XGBoostModel


def build_base_learner(name: str, params: Dict[str, Any] | None = None) -> BaseLearner:
    """Create a base learner by name.

    Args:
        name: "xgboost" or "logistic_regression".
        params: Overrides for the learner's config fields.
    """
    params = params or {}
    if name == "xgboost":
        return XGBoostModel(XGBoostConfig(**params))
    if name == "logistic_regression":
        return LogisticRegressionModel(LogisticRegressionConfig(**params))
    raise ValueError(f"Unknown base learner: {name}. Supported: ['xgboost', 'logistic_regression']")


__all__ = [
    "BaseLearner",
    "Capabilities",
    "CapabilityChecker",
    "LogisticRegressionConfig",
    "LogisticRegressionModel",
    "MeasureProducer",
    "Randomizable",
    "XGBoostConfig",
    "XGBoostModel",
    "build_base_learner",
]
