"""Evaluation module for imbalanced binary classification metrics."""

from unskew.evaluation.metrics import (
    compute_accuracy,
    compute_auc,
    compute_balanced_accuracy,
    compute_brier,
    compute_gmean,
    compute_metrics,
)

__all__ = [
    "compute_accuracy",
    "compute_auc",
    "compute_balanced_accuracy",
    "compute_brier",
    "compute_gmean",
    "compute_metrics",
]
