"""Shared fixtures: the classic PlayTennis table and small hand-built tables."""

from __future__ import annotations

import pytest

from id3kit.dataset import Dataset

PLAY_TENNIS_HEADERS: list[str] = ["Outlook", "Temperature", "Humidity", "Wind", "PlayTennis"]

PLAY_TENNIS_ROWS: list[list[str]] = [
    ["Sunny", "Hot", "High", "Weak", "No"],
    ["Sunny", "Hot", "High", "Strong", "No"],
    ["Overcast", "Hot", "High", "Weak", "Yes"],
    ["Rain", "Mild", "High", "Weak", "Yes"],
    ["Rain", "Cool", "Normal", "Weak", "Yes"],
    ["Rain", "Cool", "Normal", "Strong", "No"],
    ["Overcast", "Cool", "Normal", "Strong", "Yes"],
    ["Sunny", "Mild", "High", "Weak", "No"],
    ["Sunny", "Cool", "Normal", "Weak", "Yes"],
    ["Rain", "Mild", "Normal", "Weak", "Yes"],
    ["Sunny", "Mild", "Normal", "Strong", "Yes"],
    ["Overcast", "Mild", "High", "Strong", "Yes"],
    ["Overcast", "Hot", "Normal", "Weak", "Yes"],
    ["Rain", "Mild", "High", "Strong", "No"],
]

PLAY_TENNIS_TEXT: str = "\n".join(" ".join(line) for line in [PLAY_TENNIS_HEADERS, *PLAY_TENNIS_ROWS]) + "\n"


@pytest.fixture
def play_tennis_headers() -> list[str]:
    """Header names of the PlayTennis table.

    Returns:
        list[str]: A fresh copy of the headers.
    """
    return list(PLAY_TENNIS_HEADERS)


@pytest.fixture
def play_tennis_rows() -> list[list[str]]:
    """Rows of the 14-example PlayTennis table.

    Returns:
        list[list[str]]: A fresh copy of the rows.
    """
    return [list(row) for row in PLAY_TENNIS_ROWS]


@pytest.fixture
def play_tennis(play_tennis_rows: list[list[str]], play_tennis_headers: list[str]) -> Dataset:
    """Encoded PlayTennis dataset with `PlayTennis` as target.

    Args:
        play_tennis_rows (list[list[str]]): Fixture rows.
        play_tennis_headers (list[str]): Fixture headers.

    Returns:
        Dataset: The encoded dataset.
    """
    return Dataset.from_rows(play_tennis_rows, "PlayTennis", play_tennis_headers)


@pytest.fixture
def play_tennis_text() -> str:
    """The PlayTennis table as whitespace-delimited text.

    Returns:
        str: Header line followed by one line per example.
    """
    return PLAY_TENNIS_TEXT
