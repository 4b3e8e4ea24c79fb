"""Attribute encoding: map raw string values to dense integer codes per column."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
import polars as pl

# ---------------------------------------------------------------------------
# Public interface -- Attribute domains
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AttributeDomain:
    """The ordered set of values observed for one attribute (column).

    Codes are assigned in first-occurrence order: the first distinct value seen
    in the column gets code 0, the next new one code 1, and so on. This order
    decides majority-vote tie-breaks and the order of branches in rendered
    trees, so it is never sorted.

    Attributes:
        index (int): Column position of the attribute in the header list.
        name (str): Attribute name from the header list.
        values (tuple[str, ...]): Distinct values indexed by their code.

    Examples:
        >>> domain = AttributeDomain(index=0, name="Outlook", values=("Sunny", "Overcast", "Rain"))
        >>> domain.encode("Rain")
        2
        >>> domain.decode(1)
        'Overcast'
    """

    index: int
    name: str
    values: tuple[str, ...]
    _codes: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_codes", {value: code for code, value in enumerate(self.values)})

    @property
    def size(self) -> int:
        """Number of distinct values in the domain."""
        return len(self.values)

    def encode(self, value: str) -> int:
        """Return the integer code of `value`.

        Args:
            value (str): A raw value previously seen in this column.

        Returns:
            int: The value's code.

        Raises:
            KeyError: If `value` was never seen in this column.
        """
        return self._codes[value]

    def decode(self, code: int) -> str:
        """Return the raw value for `code`.

        Args:
            code (int): A code in `range(self.size)`.

        Returns:
            str: The raw string value.
        """
        return self.values[code]


# ---------------------------------------------------------------------------
# Public interface -- Encoding
# ---------------------------------------------------------------------------


def encode_column(values: Sequence[str]) -> tuple[tuple[str, ...], np.ndarray]:
    """Encode one column of raw values into first-occurrence integer codes.

    Args:
        values (Sequence[str]): Raw values in row order.

    Returns:
        tuple[tuple[str, ...], np.ndarray]: A 2-tuple of `(domain, codes)`
            where *domain* lists the distinct values by code and *codes* is a
            1-D int64 array with one code per row.
    """
    series = pl.Series(values=list(values), dtype=pl.String)
    return _encode_series(series)


def encode_rows(
    rows: Sequence[Sequence[str]],
    headers: Sequence[str],
) -> tuple[list[AttributeDomain], np.ndarray]:
    """Encode a row-major table of raw values column by column.

    The caller guarantees that every row has exactly one value per header.

    Args:
        rows (Sequence[Sequence[str]]): Training examples, one sequence of raw
            values per row.
        headers (Sequence[str]): Attribute names, one per column.

    Returns:
        tuple[list[AttributeDomain], np.ndarray]: A 2-tuple of
            `(domains, columns)` where *domains* holds one `AttributeDomain`
            per header and *columns* is a column-major int64 array with shape
            `(len(headers), len(rows))`.
    """
    domains: list[AttributeDomain] = []
    column_arrays: list[np.ndarray] = []
    for index, name in enumerate(headers):
        domain_values, codes = encode_column([row[index] for row in rows])
        domains.append(AttributeDomain(index=index, name=name, values=domain_values))
        column_arrays.append(codes)
    return domains, _stack_columns(column_arrays, len(rows))


def encode_dataframe(df: pl.DataFrame) -> tuple[list[AttributeDomain], np.ndarray]:
    """Encode every column of a DataFrame, treating all values as strings.

    Args:
        df (pl.DataFrame): Training examples; column names become attribute
            names.

    Returns:
        tuple[list[AttributeDomain], np.ndarray]: Same as `encode_rows`.

    Raises:
        ValueError: If any column contains null values.
    """
    null_columns = [name for name in df.columns if df[name].null_count() > 0]
    if null_columns:
        raise ValueError(f"Columns contain null values, which ID3 cannot encode: {null_columns}")

    domains: list[AttributeDomain] = []
    column_arrays: list[np.ndarray] = []
    for index, name in enumerate(df.columns):
        domain_values, codes = _encode_series(df[name].cast(pl.String))
        domains.append(AttributeDomain(index=index, name=name, values=domain_values))
        column_arrays.append(codes)
    return domains, _stack_columns(column_arrays, df.height)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _encode_series(series: pl.Series) -> tuple[tuple[str, ...], np.ndarray]:
    """Encode a String series via an Enum whose categories follow first occurrence.

    Args:
        series (pl.Series): A non-null String series.

    Returns:
        tuple[tuple[str, ...], np.ndarray]: Domain values and int64 codes.
    """
    if series.is_empty():
        return (), np.empty(0, dtype=np.int64)
    domain_values = series.unique(maintain_order=True).to_list()
    codes = series.cast(pl.Enum(domain_values)).to_physical().to_numpy().astype(np.int64)
    return tuple(domain_values), codes


def _stack_columns(column_arrays: list[np.ndarray], num_rows: int) -> np.ndarray:
    """Stack per-column code arrays into a column-major 2-D array.

    Args:
        column_arrays (list[np.ndarray]): One 1-D code array per column.
        num_rows (int): Number of rows, used when there are no columns.

    Returns:
        np.ndarray: Array of shape `(len(column_arrays), num_rows)`.
    """
    if not column_arrays:
        return np.empty((0, num_rows), dtype=np.int64)
    return np.vstack(column_arrays)
