"""
Evaluation metrics for classifiers trained on imbalanced data.

Implements:
- ROC AUC: Area under the ROC curve
- Brier: Mean squared error of probability predictions
- Accuracy: Fraction of correct hard predictions
- Balanced accuracy: Mean recall over both classes
- G-mean: Geometric mean of sensitivity and specificity
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    brier_score_loss,
    recall_score,
    roc_auc_score,
)


def compute_auc(y_true: np.ndarray, y_score: np.ndarray) -> float:
    """Compute ROC AUC score.

    Args:
        y_true: True binary labels (0 or 1).
        y_score: Predicted probability of the positive class.

    Returns:
        AUC score in [0, 1].
    """
    return float(roc_auc_score(y_true, y_score))


def compute_brier(y_true: np.ndarray, y_score: np.ndarray) -> float:
    """Compute Brier score (mean squared error of probabilities).

    Lower is better. Perfect calibration = 0.
    """
    return float(brier_score_loss(y_true, y_score))


def compute_accuracy(y_true: np.ndarray, y_score: np.ndarray, threshold: float = 0.5) -> float:
    """Accuracy of hard predictions at the given probability threshold."""
    return float(accuracy_score(y_true, (y_score >= threshold).astype(int)))


def compute_balanced_accuracy(
    y_true: np.ndarray,
    y_score: np.ndarray,
    threshold: float = 0.5,
) -> float:
    """Balanced accuracy at the given probability threshold.

    Unlike plain accuracy, a model that always predicts the majority class
    scores 0.5 regardless of the imbalance.
    """
    return float(balanced_accuracy_score(y_true, (y_score >= threshold).astype(int)))


def compute_gmean(y_true: np.ndarray, y_score: np.ndarray, threshold: float = 0.5) -> float:
    """Geometric mean of sensitivity and specificity."""
    y_pred = (y_score >= threshold).astype(int)
    sensitivity = recall_score(y_true, y_pred, pos_label=1, zero_division=0.0)
    specificity = recall_score(y_true, y_pred, pos_label=0, zero_division=0.0)
    return float(np.sqrt(sensitivity * specificity))


def compute_metrics(
    y_true: np.ndarray,
    y_score: np.ndarray,
    metrics: List[str],
    threshold: float = 0.5,
) -> Dict[str, float]:
    """Compute multiple evaluation metrics.

    Args:
        y_true: True binary labels (0 or 1).
        y_score: Predicted probability of the positive class.
        metrics: List of metric names to compute.
            Supported: "auc", "brier", "accuracy", "balanced_accuracy", "gmean".
        threshold: Probability threshold for the hard-prediction metrics.

    Returns:
        Dictionary mapping metric name to value.
    """
    results = {}

    metric_funcs = {
        "auc": lambda: compute_auc(y_true, y_score),
        "brier": lambda: compute_brier(y_true, y_score),
        "accuracy": lambda: compute_accuracy(y_true, y_score, threshold),
        "balanced_accuracy": lambda: compute_balanced_accuracy(y_true, y_score, threshold),
        "gmean": lambda: compute_gmean(y_true, y_score, threshold),
    }

    for metric in metrics:
        metric_lower = metric.lower()
        if metric_lower in metric_funcs:
            results[metric_lower] = metric_funcs[metric_lower]()
        else:
            raise ValueError(f"Unknown metric: {metric}. Supported: {list(metric_funcs.keys())}")

    return results
