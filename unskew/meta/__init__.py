"""Meta-learners that rebalance training data for a wrapped learner."""

from unskew.meta.unskewed import UnskewedSamplingClassifier

__all__ = ["UnskewedSamplingClassifier"]
