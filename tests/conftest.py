"""Shared fixtures for unskew tests."""

from __future__ import annotations

import numpy as np
import pytest

from unskew.data.dataset import Dataset


def _make_dataset(labels, class_values=(0, 1), n_features: int = 2) -> Dataset:
    """Dataset whose first feature column is the row number.

    Keeps drawn rows traceable back to their source index.
    """
    labels = np.asarray(labels, dtype=object if any(v is None for v in labels) else None)
    n = len(labels)
    X = np.column_stack([np.arange(n, dtype=np.float64)] + [np.zeros(n)] * (n_features - 1))
    return Dataset(
        X=X,
        y=labels,
        feature_names=[f"x{i}" for i in range(n_features)],
        class_values=class_values,
    )


@pytest.fixture
def dataset_factory():
    """Factory building row-numbered datasets from a label list."""
    return _make_dataset


@pytest.fixture
def imbalanced_dataset() -> Dataset:
    """100 rows: every fifth row is label 1 (20 rows), the rest label 0 (80 rows)."""
    labels = [1 if i % 5 == 0 else 0 for i in range(100)]
    return _make_dataset(labels)


@pytest.fixture
def separable_dataset() -> Dataset:
    """300 rows, 10% positives, linearly separable on the first feature."""
    rng = np.random.default_rng(0)
    n_pos, n_neg = 30, 270
    X_pos = rng.normal(loc=3.0, scale=0.5, size=(n_pos, 2))
    X_neg = rng.normal(loc=-3.0, scale=0.5, size=(n_neg, 2))
    X = np.vstack([X_pos, X_neg])
    y = np.array([1] * n_pos + [0] * n_neg)
    order = rng.permutation(len(y))
    return Dataset(X=X[order], y=y[order], feature_names=["x0", "x1"])
