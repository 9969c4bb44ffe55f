"""
Resampler: draw a rebalanced training set from minority and majority groups.

Each group is sampled with replacement. The number of draws per group is
its size times a ratio, rounded half up. A single generator seeded once per
call is consumed in a fixed order:

1. all minority draws,
2. all majority draws,
3. one integer used as the base learner's seed.

Changing that order changes the output for the same seed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import numpy as np

from unskew.data.dataset import ClassGroup, Dataset
from unskew.exceptions import EmptyGroup, InvalidRatio
from unskew.sampling.stratifier import stratify

logger = logging.getLogger(__name__)

# Upper bound (exclusive) for derived learner seeds; fits any int32 random_state
MAX_LEARNER_SEED = 2**31 - 1

# numpy seeds must be non-negative; negative seeds wrap to their 64-bit pattern
_SEED_MASK = 0xFFFF_FFFF_FFFF_FFFF


@dataclass(frozen=True)
class SampleConfig:
    """Immutable sampling parameters for one resampling run.

    Attributes:
        minority_ratio: Draws from the minority group, as a multiple of its size.
        majority_ratio: Draws from the majority group, as a multiple of its size.
        seed: Seed for the run's random generator.
        minority_chance: If set, the majority target is drawn by
            roughly_balanced_majority_count() instead of using majority_ratio.
    """

    minority_ratio: float = 1.0
    majority_ratio: float = 0.5
    seed: int = 1
    minority_chance: Optional[float] = None

    def __post_init__(self) -> None:
        for name in ("minority_ratio", "majority_ratio"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidRatio(name, value)
        if self.minority_chance is not None and not math.isfinite(self.minority_chance):
            raise InvalidRatio("minority_chance", self.minority_chance)


@dataclass
class Resample:
    """Result of one resampling run.

    Attributes:
        dataset: The assembled training set, minority draws first.
        source_indices: Row indices into the input dataset, in output order.
        minority_label: Label value of the minority group.
        majority_label: Label value of the majority group.
        minority_target: Number of minority draws.
        majority_target: Number of majority draws.
        learner_seed: Seed derived from the generator after sampling.
    """

    dataset: Dataset
    source_indices: np.ndarray = field(repr=False)
    minority_label: Any
    majority_label: Any
    minority_target: int
    majority_target: int
    learner_seed: int

    def __len__(self) -> int:
        return len(self.dataset)


def seeded_generator(seed: int) -> np.random.Generator:
    """Generator for any integer seed, negative ones included."""
    return np.random.default_rng(int(seed) & _SEED_MASK)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with .5 going up (2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def target_count(group_size: int, ratio: float) -> int:
    """Number of records to draw from a group of group_size."""
    return round_half_up(group_size * ratio)


def roughly_balanced_majority_count(
    minority_goal: int,
    minority_chance: float,
    seed: int,
) -> int:
    """Majority count for roughly balanced bagging.

    Counts failures of Bernoulli(minority_chance) trials until minority_goal
    successes have been seen, i.e. a negative binomial draw. Uses its own
    generator so the resampling stream is left untouched.

    Args:
        minority_goal: Number of minority draws.
        minority_chance: Success probability in (0, 1].
        seed: Seed for the count's generator.

    Returns:
        Number of majority draws. A chance outside (0, 1] returns
        minority_goal (exact balance).
    """
    if minority_chance <= 0.0 or minority_chance > 1.0:
        return minority_goal
    if minority_goal <= 0:
        return 0
    rng = seeded_generator(seed)
    return int(rng.negative_binomial(minority_goal, minority_chance))


def compute_targets(
    minority: ClassGroup,
    majority: ClassGroup,
    config: SampleConfig,
) -> Tuple[int, int]:
    """Compute (minority_target, majority_target) for a run."""
    minority_target = target_count(len(minority), config.minority_ratio)
    if config.minority_chance is not None:
        majority_target = roughly_balanced_majority_count(
            minority_target, config.minority_chance, config.seed
        )
    else:
        majority_target = target_count(len(majority), config.majority_ratio)
    return minority_target, majority_target


def _check_not_empty(name: str, group: ClassGroup, ratio: Optional[float], target: int) -> None:
    """Fail if an empty group has a positive target or a positive ratio."""
    requested = target > 0 or (ratio is not None and ratio > 0)
    if group.is_empty and requested:
        raise EmptyGroup(name, group.label, ratio=ratio, target=target)


def _draw(rng: np.random.Generator, group: ClassGroup, target: int) -> np.ndarray:
    """Draw target row indices from group, with replacement."""
    if target == 0:
        return np.empty(0, dtype=np.intp)
    positions = rng.integers(0, len(group), size=target)
    return group.indices[positions]


def resample(
    dataset: Dataset,
    minority: ClassGroup,
    majority: ClassGroup,
    config: SampleConfig,
) -> Resample:
    """Build a rebalanced dataset by sampling each group with replacement.

    Args:
        dataset: Dataset the groups index into.
        minority: Minority group from stratify().
        majority: Majority group from stratify().
        config: Ratios and seed for this run.

    Returns:
        Resample with minority_target + majority_target records.

    Raises:
        EmptyGroup: If a group is empty but its ratio or target is > 0.
    """
    minority_target, majority_target = compute_targets(minority, majority, config)

    majority_ratio = None if config.minority_chance is not None else config.majority_ratio
    _check_not_empty("minority", minority, config.minority_ratio, minority_target)
    _check_not_empty("majority", majority, majority_ratio, majority_target)

    rng = seeded_generator(config.seed)
    minority_rows = _draw(rng, minority, minority_target)
    majority_rows = _draw(rng, majority, majority_target)
    learner_seed = int(rng.integers(0, MAX_LEARNER_SEED))

    source_indices = np.concatenate([minority_rows, majority_rows]).astype(np.intp)

    logger.info(
        "Resampled %d minority (label=%r, from %d) + %d majority (label=%r, from %d), seed=%d",
        minority_target, minority.label, len(minority),
        majority_target, majority.label, len(majority),
        config.seed,
    )

    return Resample(
        dataset=dataset.take(source_indices),
        source_indices=source_indices,
        minority_label=minority.label,
        majority_label=majority.label,
        minority_target=minority_target,
        majority_target=majority_target,
        learner_seed=learner_seed,
    )


def unskewed_sample(dataset: Dataset, config: SampleConfig) -> Resample:
    """Drop unlabeled rows, stratify and resample in one call."""
    labeled = dataset.drop_missing_labels()
    minority, majority = stratify(labeled)
    return resample(labeled, minority, majority, config)
