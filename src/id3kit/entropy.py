"""Entropy, information gain and majority vote over subsets of a dataset."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from id3kit.exceptions import TreeInvariantError

if TYPE_CHECKING:
    from id3kit.dataset import Dataset

_LN_2: float = math.log(2.0)


def class_counts(dataset: Dataset, rows: np.ndarray) -> np.ndarray:
    """Tally how many rows carry each target class code.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Row indices to tally.

    Returns:
        np.ndarray: int64 array of length `dataset.target_domain.size`.
    """
    return np.bincount(dataset.target_codes[rows], minlength=dataset.target_domain.size)


def entropy(dataset: Dataset, rows: np.ndarray) -> float:
    """Shannon entropy, in bits, of the target class distribution over `rows`.

    Classes absent from `rows` contribute nothing to the sum.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Non-empty array of row indices.

    Returns:
        float: `-sum(p * log2(p))` over the classes present in `rows`.

    Raises:
        TreeInvariantError: If `rows` is empty.
    """
    if len(rows) == 0:
        raise TreeInvariantError("entropy() requires a non-empty row subset")
    counts = class_counts(dataset, rows)
    probabilities = counts[counts > 0] / len(rows)
    return float(-np.sum(probabilities * (np.log(probabilities) / _LN_2)))


def partition(dataset: Dataset, rows: np.ndarray, attribute: int) -> list[np.ndarray]:
    """Split `rows` into one bucket per value code of `attribute`.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Row indices to split.
        attribute (int): Attribute index to split on.

    Returns:
        list[np.ndarray]: Bucket `i` holds the rows whose `attribute` code is
            `i`, in their original order. Buckets may be empty.
    """
    codes = dataset.columns[attribute][rows]
    return [rows[codes == code] for code in range(dataset.domains[attribute].size)]


def information_gain(dataset: Dataset, rows: np.ndarray, attribute: int) -> float:
    """Entropy reduction achieved by splitting `rows` on `attribute`.

    Every value of the attribute's full domain is considered; values with no
    rows in the subset are skipped rather than passed to `entropy`.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Non-empty array of row indices.
        attribute (int): Candidate split attribute.

    Returns:
        float: `entropy(rows) - sum(|S_v| / |rows| * entropy(S_v))`.

    Raises:
        TreeInvariantError: If `rows` is empty.
    """
    parent_entropy = entropy(dataset, rows)
    total = len(rows)
    remainder = 0.0
    for bucket in partition(dataset, rows, attribute):
        if len(bucket) == 0:
            continue
        remainder += len(bucket) / total * entropy(dataset, bucket)
    return parent_entropy - remainder


def majority_class(dataset: Dataset, rows: np.ndarray) -> int:
    """Most frequent target class code over `rows`; ties go to the lowest code.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Non-empty array of row indices.

    Returns:
        int: The winning class code.

    Raises:
        TreeInvariantError: If `rows` is empty.
    """
    if len(rows) == 0:
        raise TreeInvariantError("majority_class() requires a non-empty row subset")
    best_code, best_count = -1, -1
    for code, count in enumerate(class_counts(dataset, rows)):
        if count > best_count:
            best_code, best_count = code, int(count)
    return best_code
