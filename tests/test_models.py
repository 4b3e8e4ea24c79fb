"""Tests for tree node models and structural helpers."""

from __future__ import annotations

import pydantic
import pytest
from pytest_check import check

from id3kit.dataset import Dataset
from id3kit.exceptions import TreeInvariantError
from id3kit.models import InternalNode, LeafNode, count_leaves, tree_depth, validate_tree


class TestLeafNode:
    """Tests for `LeafNode`."""

    def test_defaults(self) -> None:
        """A leaf should default to kind 'leaf' and zero gain."""
        leaf = LeafNode(class_code=3)

        with check:
            assert leaf.kind == "leaf"
        with check:
            assert leaf.gain == 0.0

    def test_negative_class_code_is_rejected(self) -> None:
        """Class codes index the target domain and cannot be negative."""
        with pytest.raises(pydantic.ValidationError):
            LeafNode(class_code=-1)

    def test_is_frozen(self) -> None:
        """Nodes are immutable once built."""
        leaf = LeafNode(class_code=0)

        with pytest.raises(pydantic.ValidationError):
            leaf.class_code = 1  # type: ignore[misc]


class TestInternalNode:
    """Tests for `InternalNode`."""

    def test_requires_at_least_one_child(self) -> None:
        """An internal node without children is rejected."""
        with pytest.raises(pydantic.ValidationError):
            InternalNode(attribute_index=0, gain=0.5, children=[])

    def test_round_trips_through_json(self) -> None:
        """Nested trees should serialize and parse back via the `kind` discriminator."""
        # Arrange
        tree = InternalNode(
            attribute_index=0,
            gain=0.5,
            children=[
                LeafNode(class_code=0),
                InternalNode(attribute_index=1, gain=1.0, children=[LeafNode(class_code=1), LeafNode(class_code=0)]),
            ],
        )

        # Act
        parsed = InternalNode.model_validate_json(tree.model_dump_json())

        # Assert
        with check:
            assert parsed == tree
        with check:
            assert isinstance(parsed.children[1], InternalNode)


class TestTreeStatistics:
    """Tests for `tree_depth` and `count_leaves`."""

    def test_single_leaf(self) -> None:
        """A lone leaf has depth 0 and one leaf."""
        leaf = LeafNode(class_code=0)

        with check:
            assert tree_depth(leaf) == 0
        with check:
            assert count_leaves(leaf) == 1

    def test_unbalanced_tree(self) -> None:
        """Depth follows the longest path; leaves are counted across all branches."""
        tree = InternalNode(
            attribute_index=0,
            gain=0.1,
            children=[
                LeafNode(class_code=0),
                InternalNode(attribute_index=1, gain=0.2, children=[LeafNode(class_code=1), LeafNode(class_code=0)]),
                LeafNode(class_code=1),
            ],
        )

        with check:
            assert tree_depth(tree) == 2
        with check:
            assert count_leaves(tree) == 4


class TestValidateTree:
    """Tests for `validate_tree`: structural invariants against a dataset."""

    @pytest.fixture
    def dataset(self) -> Dataset:
        """Dataset with a 2-value attribute `a`, 3-value attribute `b`, and 2 classes.

        Returns:
            Dataset: The encoded dataset.
        """
        rows = [["x", "p", "no"], ["y", "q", "yes"], ["x", "r", "no"]]
        return Dataset.from_rows(rows, "label", ["a", "b", "label"])

    def test_valid_tree_passes(self, dataset: Dataset) -> None:
        """A well-formed tree should not raise."""
        tree = InternalNode(attribute_index=0, gain=0.9, children=[LeafNode(class_code=0), LeafNode(class_code=1)])

        validate_tree(tree, dataset)

    def test_wrong_child_count_is_rejected(self, dataset: Dataset) -> None:
        """Child count must equal the split attribute's domain size."""
        tree = InternalNode(attribute_index=1, gain=0.9, children=[LeafNode(class_code=0), LeafNode(class_code=1)])

        with pytest.raises(TreeInvariantError, match="expected 3"):
            validate_tree(tree, dataset)

    def test_out_of_range_class_code_is_rejected(self, dataset: Dataset) -> None:
        """Leaf class codes must index the target domain."""
        with pytest.raises(TreeInvariantError, match="outside the target domain"):
            validate_tree(LeafNode(class_code=2), dataset)

    def test_split_on_target_is_rejected(self, dataset: Dataset) -> None:
        """The target attribute is never a split candidate."""
        tree = InternalNode(attribute_index=2, gain=0.9, children=[LeafNode(class_code=0), LeafNode(class_code=1)])

        with pytest.raises(TreeInvariantError, match="invalid attribute"):
            validate_tree(tree, dataset)

    def test_repeated_attribute_on_path_is_rejected(self, dataset: Dataset) -> None:
        """An attribute may only be split on once along a root-to-leaf path."""
        inner = InternalNode(attribute_index=0, gain=0.1, children=[LeafNode(class_code=0), LeafNode(class_code=1)])
        tree = InternalNode(attribute_index=0, gain=0.9, children=[inner, LeafNode(class_code=1)])

        with pytest.raises(TreeInvariantError, match="split on twice"):
            validate_tree(tree, dataset)

    def test_shared_subtree_is_rejected(self, dataset: Dataset) -> None:
        """The same node object may not hang under two parents."""
        shared = LeafNode(class_code=0)
        tree = InternalNode(attribute_index=0, gain=0.9, children=[shared, shared])

        with pytest.raises(TreeInvariantError, match="shared"):
            validate_tree(tree, dataset)
