"""
Stratifier: split a binary-labeled dataset into minority and majority groups.

Rows whose label equals the positive value (class_values[1]) form one group,
all others the second group. The group with fewer rows is the minority. On
equal sizes the group of class_values[0] is the minority.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from unskew.data.dataset import ClassGroup, Dataset
from unskew.exceptions import InvalidLabelDomain, MissingLabel

logger = logging.getLogger(__name__)


def validate_labels(dataset: Dataset) -> None:
    """Check that every label is set and belongs to the class domain.

    Raises:
        MissingLabel: If any label is missing.
        InvalidLabelDomain: If any label is outside dataset.class_values.
    """
    missing = dataset.missing_label_mask
    if missing.any():
        raise MissingLabel(int(missing.sum()))

    negative, positive = dataset.class_values
    in_domain = (dataset.y == negative) | (dataset.y == positive)
    if not in_domain.all():
        raise InvalidLabelDomain(dataset.y[~in_domain].tolist(), dataset.class_values)


def stratify(dataset: Dataset) -> Tuple[ClassGroup, ClassGroup]:
    """Partition a dataset into (minority_group, majority_group).

    Args:
        dataset: Dataset whose labels are all set and binary.

    Returns:
        Tuple of (minority_group, majority_group). Each group keeps its rows
        in dataset order.

    Raises:
        MissingLabel: If any label is missing.
        InvalidLabelDomain: If any label is outside dataset.class_values.
    """
    validate_labels(dataset)

    negative, positive = dataset.class_values
    is_positive = dataset.y == positive

    first = ClassGroup(label=negative, indices=np.flatnonzero(~is_positive))
    second = ClassGroup(label=positive, indices=np.flatnonzero(is_positive))

    # Swap only on strictly larger, so ties leave class_values[0] as minority
    if len(first) > len(second):
        minority, majority = second, first
    else:
        minority, majority = first, second

    logger.debug(
        "Stratified %d rows: minority label=%r (%d), majority label=%r (%d)",
        len(dataset), minority.label, len(minority), majority.label, len(majority),
    )
    return minority, majority
