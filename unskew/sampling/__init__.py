"""Stratified resampling for class-imbalanced binary datasets."""

from unskew.sampling.resampler import (
    Resample,
    SampleConfig,
    compute_targets,
    resample,
    roughly_balanced_majority_count,
    round_half_up,
    seeded_generator,
    target_count,
    unskewed_sample,
)
from unskew.sampling.stratifier import stratify, validate_labels

__all__ = [
    "Resample",
    "SampleConfig",
    "compute_targets",
    "resample",
    "roughly_balanced_majority_count",
    "round_half_up",
    "seeded_generator",
    "stratify",
    "target_count",
    "unskewed_sample",
    "validate_labels",
]
