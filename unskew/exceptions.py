"""
Exception hierarchy for unskewed sampling.

Every error raised by the stratifier, the resampler or the capability
checker derives from UnskewError, so callers can catch the whole family
in one place. None of them are retried internally: a resampling run either
produces a complete dataset or fails with one of these.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


class UnskewError(Exception):
    """Base exception for all resampling errors."""

    pass


class InvalidLabelDomain(UnskewError):
    """Raised when labels fall outside the two-valued class domain.

    Attributes:
        unexpected: Label values that are not part of the domain.
        class_values: The expected label domain.
    """

    def __init__(self, unexpected: Iterable[Any], class_values: Iterable[Any]):
        self.unexpected = sorted(set(unexpected), key=repr)
        self.class_values = tuple(class_values)
        super().__init__(
            f"Labels {self.unexpected} are outside the class domain {self.class_values}"
        )


class MissingLabel(UnskewError):
    """Raised when a record reaches the stratifier without a label."""

    def __init__(self, n_missing: int):
        self.n_missing = n_missing
        super().__init__(
            f"{n_missing} record(s) have a missing label; "
            "drop them with Dataset.drop_missing_labels() first"
        )


class InvalidRatio(UnskewError):
    """Raised when a sampling ratio is negative or not finite."""

    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a finite value >= 0, got {value}")


class EmptyGroup(UnskewError):
    """Raised when records must be drawn from a class group with no members.

    An empty group always has a zero target under the ratio rule, so the
    configured ratio is reported alongside the target.
    """

    def __init__(
        self,
        group: str,
        label: Any,
        ratio: Optional[float] = None,
        target: int = 0,
    ):
        self.group = group
        self.label = label
        self.ratio = ratio
        self.target = target
        super().__init__(
            f"Cannot sample from empty {group} group "
            f"(label={label!r}, ratio={ratio}, target={target})"
        )


class CapabilityViolation(UnskewError):
    """Raised when a dataset violates the base learner's capabilities."""

    pass
