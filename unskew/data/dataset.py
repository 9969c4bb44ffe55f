"""
Dataset and class group containers.

A Dataset holds a feature matrix, a label vector and its schema (feature
names plus the ordered two-valued label domain). Sampling code only ever
reads labels and builds new Datasets from row indices; it never mutates
the arrays of its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd


@dataclass
class Dataset:
    """Binary-labeled dataset.

    Attributes:
        X: Feature matrix of shape (n_samples, n_features).
        y: Label vector of shape (n_samples,). Missing labels are None/NaN.
        feature_names: Names of the feature columns.
        class_values: Ordered label domain. class_values[1] is the
            "positive" value the stratifier routes on.
    """

    X: np.ndarray
    y: np.ndarray
    feature_names: List[str]
    class_values: Tuple[Any, Any] = (0, 1)

    def __post_init__(self) -> None:
        """Validate shapes and the label domain."""
        self.X = np.asarray(self.X)
        self.y = np.asarray(self.y)
        self.class_values = tuple(self.class_values)

        if self.X.ndim != 2:
            raise ValueError(f"X must be 2-D, got shape {self.X.shape}")
        if self.y.ndim != 1:
            raise ValueError(f"y must be 1-D, got shape {self.y.shape}")
        if len(self.X) != len(self.y):
            raise ValueError(
                f"Shape mismatch: X={len(self.X)}, y={len(self.y)}"
            )
        if self.X.shape[1] != len(self.feature_names):
            raise ValueError(
                f"X must have {len(self.feature_names)} columns, got shape {self.X.shape}"
            )
        if len(self.class_values) != 2 or self.class_values[0] == self.class_values[1]:
            raise ValueError(
                f"class_values must hold exactly two distinct labels, got {self.class_values}"
            )

    def __len__(self) -> int:
        return len(self.y)

    @property
    def n_features(self) -> int:
        """Number of feature columns."""
        return self.X.shape[1]

    @property
    def missing_label_mask(self) -> np.ndarray:
        """Boolean mask of rows whose label is unset."""
        return np.asarray(pd.isna(self.y), dtype=bool)

    def take(self, indices: Sequence[int] | np.ndarray) -> Dataset:
        """Build a new Dataset from row indices (repeats allowed).

        The schema is shared, the arrays are new.
        """
        idx = np.asarray(indices, dtype=np.intp)
        return Dataset(
            X=self.X[idx],
            y=self.y[idx],
            feature_names=list(self.feature_names),
            class_values=self.class_values,
        )

    def drop_missing_labels(self) -> Dataset:
        """Return a copy without the rows that have a missing label."""
        return self.take(np.flatnonzero(~self.missing_label_mask))

    def label_indices(self) -> np.ndarray:
        """Map labels to their position in class_values (0 or 1).

        Assumes every label is present and inside the domain.
        """
        return (self.y == self.class_values[1]).astype(int)

    def class_counts(self) -> Dict[Any, int]:
        """Number of labeled rows per class value."""
        return {value: int(np.sum(self.y == value)) for value in self.class_values}

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        label_col: str = "y",
        class_values: Tuple[Any, Any] = (0, 1),
        feature_cols: List[str] | None = None,
    ) -> Dataset:
        """Build a Dataset from a DataFrame.

        Args:
            df: Input dataframe with feature columns and a label column.
            label_col: Name of the label column.
            class_values: Ordered two-valued label domain.
            feature_cols: Feature columns to use. If None, uses all columns
                except label_col.
        """
        if label_col not in df.columns:
            raise ValueError(f"DataFrame must have '{label_col}' column")
        if feature_cols is None:
            feature_cols = [c for c in df.columns if c != label_col]
        return cls(
            X=df[feature_cols].values,
            y=df[label_col].values,
            feature_names=list(feature_cols),
            class_values=class_values,
        )

    def to_frame(self, label_col: str = "y") -> pd.DataFrame:
        """Convert back to a DataFrame with features and a label column."""
        df = pd.DataFrame(self.X, columns=self.feature_names)
        df[label_col] = self.y
        return df


@dataclass(frozen=True)
class ClassGroup:
    """Records of one dataset that share a single label value.

    Stores row indices into the source Dataset rather than copies of the
    records, in their original order.
    """

    label: Any
    indices: np.ndarray = field(repr=False)

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def is_empty(self) -> bool:
        return len(self.indices) == 0
