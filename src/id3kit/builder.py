"""ID3 tree induction: best-attribute selection and the recursive split."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from loguru import logger

from id3kit.dataset import Dataset
from id3kit.entropy import information_gain, majority_class, partition
from id3kit.exceptions import TreeInvariantError
from id3kit.models import InternalNode, LeafNode, TreeNode

# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def select_best_attribute(
    dataset: Dataset,
    rows: np.ndarray,
    candidates: Sequence[int],
) -> tuple[int, float]:
    """Pick the candidate attribute with the highest information gain.

    Candidates are scanned in order and the best is only replaced by a
    strictly greater gain, so on an exact tie the earliest candidate wins.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Non-empty row subset being split.
        candidates (Sequence[int]): Attribute indices still available.

    Returns:
        tuple[int, float]: A 2-tuple of `(attribute_index, gain)`.

    Raises:
        TreeInvariantError: If `candidates` is empty.
    """
    if not candidates:
        raise TreeInvariantError("select_best_attribute() requires at least one candidate attribute")
    best_attribute = candidates[0]
    best_gain = information_gain(dataset, rows, best_attribute)
    for attribute in candidates[1:]:
        gain = information_gain(dataset, rows, attribute)
        if gain > best_gain:
            best_attribute, best_gain = attribute, gain
    return best_attribute, best_gain


def build_tree(dataset: Dataset) -> TreeNode:
    """Grow an ID3 decision tree over every example of `dataset`.

    Args:
        dataset (Dataset): The encoded dataset with a resolved target.

    Returns:
        TreeNode: Root of the new tree.

    Raises:
        TreeInvariantError: If the dataset holds no examples.
    """
    if dataset.num_examples == 0:
        raise TreeInvariantError("Cannot grow a decision tree from a dataset with no examples")
    return _build_subtree(dataset, dataset.all_rows(), dataset.candidate_attributes())


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _build_subtree(dataset: Dataset, rows: np.ndarray, candidates: list[int]) -> TreeNode:
    """Recursively build the subtree for one row subset.

    Args:
        dataset (Dataset): The encoded dataset.
        rows (np.ndarray): Non-empty row subset reaching this node.
        candidates (list[int]): Attributes not yet split on along this path.

    Returns:
        TreeNode: A leaf when the subset is pure or no attribute is left,
            otherwise an internal node with one child per attribute value.
    """
    target_codes = dataset.target_codes[rows]
    first_class = int(target_codes[0])
    if np.all(target_codes == first_class):
        return LeafNode(class_code=first_class)

    if not candidates:
        return LeafNode(class_code=majority_class(dataset, rows))

    best_attribute, gain = select_best_attribute(dataset, rows, candidates)
    logger.debug(
        "Splitting on attribute",
        attribute=dataset.domains[best_attribute].name,
        gain=gain,
        rows=len(rows),
    )

    remaining = [attribute for attribute in candidates if attribute != best_attribute]
    # Empty buckets fall back to the parent's majority class.
    fallback_class: int | None = None
    children: list[TreeNode] = []
    for bucket in partition(dataset, rows, best_attribute):
        if len(bucket) == 0:
            if fallback_class is None:
                fallback_class = majority_class(dataset, rows)
            children.append(LeafNode(class_code=fallback_class))
        else:
            children.append(_build_subtree(dataset, bucket, remaining))

    return InternalNode(attribute_index=best_attribute, gain=gain, children=children)
