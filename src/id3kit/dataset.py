"""Column-major encoded training data and target-attribute resolution."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import polars as pl

from id3kit.encoding import AttributeDomain, encode_dataframe, encode_rows
from id3kit.exceptions import TargetAttributeNotFoundError


class Dataset:
    """Encoded training examples plus the index of the target attribute.

    Codes are stored column-major: `columns[attribute][row]` is the code of
    `row`'s value for `attribute`. Instances are built with `from_rows` or
    `from_dataframe`, both of which refuse to build a dataset whose target
    attribute cannot be resolved.

    Attributes:
        domains (list[AttributeDomain]): One domain per attribute, in header order.
        columns (np.ndarray): int64 array of shape `(num_attributes, num_examples)`.
        target_index (int): Column index of the target attribute.

    Examples:
        >>> dataset = Dataset.from_rows(
        ...     [["Sunny", "No"], ["Rain", "Yes"]],
        ...     "Play",
        ...     ["Outlook", "Play"],
        ... )
        >>> dataset.target_index
        1
        >>> dataset.candidate_attributes()
        [0]
    """

    def __init__(self, domains: list[AttributeDomain], columns: np.ndarray, target_index: int) -> None:
        """Initialize a Dataset from already-encoded columns.

        Args:
            domains (list[AttributeDomain]): One domain per attribute.
            columns (np.ndarray): Column-major int64 codes.
            target_index (int): Column index of the target attribute.
        """
        self.domains = domains
        self.columns = columns
        self.target_index = target_index

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[str]],
        target_name: str,
        headers: Sequence[str],
    ) -> Dataset:
        """Encode raw rows and resolve the target attribute by name.

        Row width is not re-validated here; every row must already hold one
        value per header.

        Args:
            rows (Sequence[Sequence[str]]): Training examples.
            target_name (str): Name of the attribute to predict.
            headers (Sequence[str]): Attribute names, one per column.

        Returns:
            Dataset: The encoded dataset.

        Raises:
            TargetAttributeNotFoundError: If `target_name` is not in `headers`.
        """
        target_index = resolve_target_index(headers, target_name)
        domains, columns = encode_rows(rows, headers)
        return cls(domains, columns, target_index)

    @classmethod
    def from_dataframe(cls, df: pl.DataFrame, target_name: str) -> Dataset:
        """Encode a DataFrame of categorical columns and resolve the target.

        Args:
            df (pl.DataFrame): Training examples; every column is cast to String.
            target_name (str): Name of the target column.

        Returns:
            Dataset: The encoded dataset.

        Raises:
            TargetAttributeNotFoundError: If `target_name` is not a column of `df`.
        """
        target_index = resolve_target_index(df.columns, target_name)
        domains, columns = encode_dataframe(df)
        return cls(domains, columns, target_index)

    @property
    def num_attributes(self) -> int:
        """Number of attributes, including the target."""
        return len(self.domains)

    @property
    def num_examples(self) -> int:
        """Number of training examples."""
        return int(self.columns.shape[1])

    @property
    def headers(self) -> list[str]:
        """Attribute names in column order."""
        return [domain.name for domain in self.domains]

    @property
    def target_domain(self) -> AttributeDomain:
        """Domain of the target attribute."""
        return self.domains[self.target_index]

    @property
    def target_codes(self) -> np.ndarray:
        """Target class code of every example."""
        return self.columns[self.target_index]

    def candidate_attributes(self) -> list[int]:
        """Return every attribute index except the target, in column order.

        Returns:
            list[int]: Indices of the attributes a tree may split on.
        """
        return [index for index in range(self.num_attributes) if index != self.target_index]

    def all_rows(self) -> np.ndarray:
        """Return the indices of every example.

        Returns:
            np.ndarray: `arange(num_examples)`.
        """
        return np.arange(self.num_examples)

    def decode_row(self, row: int) -> list[str]:
        """Decode one example back to its raw values.

        Args:
            row (int): Example index.

        Returns:
            list[str]: Raw values in header order.
        """
        return [domain.decode(int(self.columns[domain.index, row])) for domain in self.domains]


def resolve_target_index(headers: Sequence[str], target_name: str) -> int:
    """Return the index of the first header equal to `target_name`.

    Args:
        headers (Sequence[str]): Attribute names in column order.
        target_name (str): The name to look for.

    Returns:
        int: Position of the first exact match.

    Raises:
        TargetAttributeNotFoundError: If no header matches.
    """
    for index, header in enumerate(headers):
        if header == target_name:
            return index
    raise TargetAttributeNotFoundError(target_name, list(headers))
