"""
CSV-based data backend.

Loads a labeled CSV file into a Dataset. Rows with an empty label cell are
kept here; the meta-learner drops them before stratification.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from unskew.data.dataset import Dataset
from unskew.exceptions import InvalidLabelDomain

logger = logging.getLogger(__name__)


def infer_class_values(labels: pd.Series) -> Tuple[Any, Any]:
    """Infer the ordered two-valued label domain from a label column.

    Labels that are a subset of {0, 1} map to (0, 1). Otherwise exactly two
    distinct non-missing values must be present; they are sorted so the
    first value is the lower one.

    Raises:
        InvalidLabelDomain: If the column does not hold a binary domain.
    """
    unique = pd.unique(labels.dropna())
    if set(unique).issubset({0, 1}):
        return (0, 1)
    if len(unique) != 2:
        raise InvalidLabelDomain(unique, ())
    first, second = sorted(unique.tolist())
    return (first, second)


class CSVBackend:
    """Backend that loads a single labeled CSV file.

    - All columns except the label column are features
    - Features are cast to float64
    - An optional meta.json next to the CSV is exposed as metadata
    """

    def __init__(
        self,
        path: str | Path,
        label_col: str = "y",
        class_values: Optional[Tuple[Any, Any]] = None,
    ):
        """Initialize CSV backend.

        Args:
            path: Path to the CSV file.
            label_col: Name of the label column.
            class_values: Ordered label domain. Inferred from the data if None.
        """
        self.path = Path(path)
        self.label_col = label_col
        self._class_values = class_values

        self._load_data()

    def _load_data(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(f"Required file not found: {self.path}")

        self._df = pd.read_csv(self.path)
        if self.label_col not in self._df.columns:
            raise ValueError(f"{self.path.name} must have '{self.label_col}' column")

        if self._class_values is None:
            self._class_values = infer_class_values(self._df[self.label_col])

        meta_path = self.path.with_name("meta.json")
        if meta_path.exists():
            with open(meta_path) as f:
                self._meta = json.load(f)
        else:
            self._meta = {}

        logger.info("Loaded %d rows from %s", len(self._df), self.path)

    @property
    def feature_names(self) -> List[str]:
        """Return list of feature column names."""
        return [c for c in self._df.columns if c != self.label_col]

    @property
    def class_values(self) -> Tuple[Any, Any]:
        return self._class_values

    @property
    def metadata(self) -> dict:
        """Return metadata from meta.json if available."""
        return self._meta

    def load(self) -> Dataset:
        """Return the file contents as a Dataset."""
        features = self.feature_names
        return Dataset(
            X=self._df[features].values.astype(np.float64),
            y=self._df[self.label_col].values,
            feature_names=features,
            class_values=self._class_values,
        )

    def get_summary(self) -> dict:
        """Return summary statistics about the loaded data."""
        labels = self._df[self.label_col]
        return {
            "n_rows": len(self._df),
            "n_features": len(self.feature_names),
            "n_missing_labels": int(labels.isna().sum()),
            "class_counts": {
                str(value): int((labels == value).sum()) for value in self._class_values
            },
            "feature_names": self.feature_names,
        }


def load_csv_dataset(
    path: str | Path,
    label_col: str = "y",
    class_values: Optional[Tuple[Any, Any]] = None,
) -> Dataset:
    """Load a labeled CSV file into a Dataset."""
    return CSVBackend(path, label_col=label_col, class_values=class_values).load()
