"""Read whitespace-delimited training tables."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

import polars as pl
from loguru import logger

from id3kit.exceptions import DuplicateHeadersError, EmptyTableError, RowWidthError


class TrainingTable(NamedTuple):
    """Raw training data as read from a text table.

    Attributes:
        headers (list[str]): Attribute names from the first line.
        rows (list[list[str]]): One list of raw values per example, each with
            exactly `len(headers)` entries.
    """

    headers: list[str]
    rows: list[list[str]]

    def to_dataframe(self) -> pl.DataFrame:
        """Return the table as a DataFrame of String columns.

        Returns:
            pl.DataFrame: One column per header, one row per example.

        Raises:
            DuplicateHeadersError: If header names are not unique.
        """
        schema = dict.fromkeys(self.headers, pl.String)
        if len(schema) != len(self.headers):
            raise DuplicateHeadersError(self.headers)
        return pl.DataFrame(self.rows, schema=schema, orient="row")


def parse_training_table(lines: Iterable[str], *, source: str | None = None) -> TrainingTable:
    """Parse a training table from lines of text.

    The first non-blank line holds whitespace-separated attribute names; each
    following non-blank line holds one example's values.

    Args:
        lines (Iterable[str]): Lines of the table.
        source (str | None): Description of the input for error messages.

    Returns:
        TrainingTable: The parsed headers and rows.

    Raises:
        EmptyTableError: If there is no header line.
        RowWidthError: If a row does not have one value per header.
    """
    headers: list[str] = []
    rows: list[list[str]] = []
    for line_number, line in enumerate(lines, start=1):
        values = line.split()
        if not values:
            continue
        if not headers:
            headers = values
            continue
        if len(values) != len(headers):
            logger.warning(
                "Malformed training table row",
                source=source,
                line_number=line_number,
                expected=len(headers),
                actual=len(values),
            )
            raise RowWidthError(line_number=line_number, expected=len(headers), actual=len(values), source=source)
        rows.append(values)

    if not headers:
        raise EmptyTableError(source=source)
    return TrainingTable(headers=headers, rows=rows)


def load_training_table(path: str | Path, *, encoding: str = "utf-8") -> TrainingTable:
    """Read a training table from a text file.

    Args:
        path (str | Path): Path of the file to read.
        encoding (str): Text encoding of the file.

    Returns:
        TrainingTable: The parsed headers and rows.

    Raises:
        EmptyTableError: If the file has no header line.
        RowWidthError: If a row does not have one value per header.
    """
    path = Path(path)
    with path.open(encoding=encoding) as handle:
        table = parse_training_table(handle, source=str(path))
    logger.info("Training table loaded", source=str(path), attributes=len(table.headers), examples=len(table.rows))
    return table
