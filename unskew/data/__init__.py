"""
Dataset containers and loaders.

This module provides:
- Dataset: Feature matrix, labels and binary label domain
- ClassGroup: Row indices of one class within a Dataset
- CSVBackend: Loads a labeled CSV file into a Dataset
"""

from unskew.data.csv_backend import CSVBackend, infer_class_values, load_csv_dataset
from unskew.data.dataset import ClassGroup, Dataset

__all__ = [
    "ClassGroup",
    "CSVBackend",
    "Dataset",
    "infer_class_values",
    "load_csv_dataset",
]
