"""The ID3 engine: owns one dataset and the tree grown from it."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

import polars as pl
from loguru import logger

from id3kit.builder import build_tree
from id3kit.dataset import Dataset
from id3kit.exceptions import DatasetNotLoadedError, TargetAttributeNotFoundError, TreeNotBuiltError
from id3kit.logging import TREE_BUILD_LEVEL
from id3kit.models import TreeNode, count_leaves, tree_depth
from id3kit.render import (
    DEFAULT_GAIN_PRECISION,
    DEFAULT_GRAPH_NAME,
    DEFAULT_TEXT_MARKER,
    render_dot,
    render_text,
)


class ID3:
    """Stateful ID3 decision-tree learner.

    Load training data with `set_data` (or `set_dataframe`), grow the tree
    with `run`, then inspect it with `print_text` or `print_dot`. Loading new
    data or calling `clear` discards the previous dataset and tree in full.

    Examples:
        >>> id3 = ID3()
        >>> id3.set_data(
        ...     [["Sunny", "No"], ["Overcast", "Yes"], ["Sunny", "No"]],
        ...     "PlayTennis",
        ...     ["Outlook", "PlayTennis"],
        ... )
        >>> root = id3.run()
        >>> root.kind
        'internal'
    """

    def __init__(self) -> None:
        """Initialize an engine with no dataset and no tree."""
        self._dataset: Dataset | None = None
        self._tree: TreeNode | None = None

    # -----------------------------------------------------------------------
    # State
    # -----------------------------------------------------------------------

    @property
    def dataset(self) -> Dataset | None:
        """The loaded dataset, or `None`."""
        return self._dataset

    @property
    def tree(self) -> TreeNode | None:
        """Root of the built tree, or `None`."""
        return self._tree

    @property
    def is_loaded(self) -> bool:
        """Whether a valid dataset is loaded."""
        return self._dataset is not None

    @property
    def is_built(self) -> bool:
        """Whether a tree has been built from the loaded dataset."""
        return self._tree is not None

    def clear(self) -> None:
        """Discard the dataset and the tree. Calling it twice is harmless."""
        self._tree = None
        self._dataset = None

    # -----------------------------------------------------------------------
    # Loading and building
    # -----------------------------------------------------------------------

    def set_data(self, rows: Sequence[Sequence[str]], target_name: str, headers: Sequence[str]) -> None:
        """Replace the current dataset with `rows`, predicting `target_name`.

        Any previous dataset and tree are discarded first, so on failure the
        engine is left empty. Every row must already hold exactly one value
        per header.

        Args:
            rows (Sequence[Sequence[str]]): Training examples.
            target_name (str): Name of the attribute to predict.
            headers (Sequence[str]): Attribute names, one per column.

        Raises:
            TargetAttributeNotFoundError: If `target_name` is not in `headers`.
        """
        self.clear()
        logger.log(TREE_BUILD_LEVEL, "Loading dataset", target=target_name, examples=len(rows))
        try:
            self._dataset = Dataset.from_rows(rows, target_name, headers)
        except TargetAttributeNotFoundError:
            logger.warning("Dataset rejected: target attribute not found", target=target_name, headers=list(headers))
            raise
        self._log_loaded()

    def set_dataframe(self, df: pl.DataFrame, target_name: str) -> None:
        """Replace the current dataset with the columns of `df`.

        Args:
            df (pl.DataFrame): Training examples; every column is treated as
                categorical.
            target_name (str): Name of the target column.

        Raises:
            TargetAttributeNotFoundError: If `target_name` is not a column of `df`.
        """
        self.clear()
        logger.log(TREE_BUILD_LEVEL, "Loading dataset from DataFrame", target=target_name, examples=df.height)
        try:
            self._dataset = Dataset.from_dataframe(df, target_name)
        except TargetAttributeNotFoundError:
            logger.warning("Dataset rejected: target attribute not found", target=target_name, headers=df.columns)
            raise
        self._log_loaded()

    def run(self) -> TreeNode:
        """Grow the decision tree from the loaded dataset.

        A previously built tree is replaced, never reused.

        Returns:
            TreeNode: Root of the new tree.

        Raises:
            DatasetNotLoadedError: If no dataset is loaded.
        """
        dataset = self._require_dataset()
        self._tree = None
        logger.log(TREE_BUILD_LEVEL, "Building decision tree", examples=dataset.num_examples)
        self._tree = build_tree(dataset)
        logger.info("Decision tree built", depth=tree_depth(self._tree), leaves=count_leaves(self._tree))
        return self._tree

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def print_text(
        self,
        sink: TextIO,
        *,
        marker: str = DEFAULT_TEXT_MARKER,
        gain_precision: int = DEFAULT_GAIN_PRECISION,
    ) -> None:
        """Write the tree as indented text to `sink`.

        Args:
            sink (TextIO): Writable text stream.
            marker (str): Indentation marker repeated per depth level.
            gain_precision (int): Decimal places used to print gains.

        Raises:
            TreeNotBuiltError: If `run` has not built a tree.
        """
        dataset, tree = self._require_tree()
        render_text(tree, dataset, sink, marker=marker, gain_precision=gain_precision)

    def print_dot(self, sink: TextIO, *, graph_name: str = DEFAULT_GRAPH_NAME) -> None:
        """Write the tree as Graphviz dot text to `sink` and flush it.

        Args:
            sink (TextIO): Writable text stream.
            graph_name (str): Name written after the `digraph` keyword.

        Raises:
            TreeNotBuiltError: If `run` has not built a tree.
        """
        dataset, tree = self._require_tree()
        render_dot(tree, dataset, sink, graph_name=graph_name)

    # -----------------------------------------------------------------------
    # Private helpers
    # -----------------------------------------------------------------------

    def _log_loaded(self) -> None:
        if self._dataset is None:
            return
        logger.info(
            "Dataset loaded",
            attributes=self._dataset.num_attributes,
            examples=self._dataset.num_examples,
            target_index=self._dataset.target_index,
        )

    def _require_dataset(self) -> Dataset:
        if self._dataset is None:
            logger.warning("Cannot build tree: no dataset loaded")
            raise DatasetNotLoadedError
        return self._dataset

    def _require_tree(self) -> tuple[Dataset, TreeNode]:
        if self._dataset is None or self._tree is None:
            logger.warning("Cannot render tree: no tree built")
            raise TreeNotBuiltError
        return self._dataset, self._tree
