"""Unskewed sampling: rebalance a binary-labeled dataset before training a learner."""

from unskew.data.dataset import ClassGroup, Dataset
from unskew.exceptions import (
    CapabilityViolation,
    EmptyGroup,
    InvalidLabelDomain,
    InvalidRatio,
    MissingLabel,
    UnskewError,
)
from unskew.sampling.resampler import Resample, SampleConfig, resample, unskewed_sample
from unskew.sampling.stratifier import stratify

__all__ = [
    "CapabilityViolation",
    "ClassGroup",
    "Dataset",
    "EmptyGroup",
    "InvalidLabelDomain",
    "InvalidRatio",
    "MissingLabel",
    "Resample",
    "SampleConfig",
    "UnskewError",
    "resample",
    "stratify",
    "unskewed_sample",
]
