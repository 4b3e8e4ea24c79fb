"""Custom exceptions for id3kit.

Configuration errors (subclass ValueError):
- TargetAttributeNotFoundError: The target attribute name is not a header.
- TrainingTableError: Base class for malformed training tables.
  - EmptyTableError: The table has no header names.
  - DuplicateHeadersError: Header names repeat where unique names are required.
  - RowWidthError: A row does not have one value per header.

State errors (subclass RuntimeError):
- DatasetNotLoadedError: A tree was requested before any dataset was loaded.
- TreeNotBuiltError: A rendering was requested before a tree was built.

Invariant violations (subclass AssertionError):
- TreeInvariantError: Internal consistency check failed while growing or
  validating a tree. Unreachable for input accepted by ``ID3.set_data``.

All of them derive from ``Id3Error``; catch it to handle any id3kit failure.
"""

from __future__ import annotations


class Id3Error(Exception):
    """Base exception for all id3kit errors."""


class TargetAttributeNotFoundError(Id3Error, ValueError):
    """Raised when the target attribute name does not match any header.

    Attributes:
        target (str): The target attribute name that was requested.
        headers (list[str]): The header names that were searched.

    Examples:
        >>> err = TargetAttributeNotFoundError("PlayTennis", ["Outlook", "Wind"])
        >>> err.target
        'PlayTennis'
    """

    target: str
    headers: list[str]

    def __init__(self, target: str, headers: list[str]) -> None:
        """Initialize TargetAttributeNotFoundError.

        Args:
            target (str): The missing target attribute name.
            headers (list[str]): The header names that were searched.
        """
        super().__init__(f"Target attribute not found: {target!r} is not one of {headers}")
        self.target = target
        self.headers = list(headers)


class DatasetNotLoadedError(Id3Error, RuntimeError):
    """Raised when a tree is built before a dataset has been loaded."""

    def __init__(self, message: str = "No dataset loaded; call set_data() first") -> None:
        """Initialize DatasetNotLoadedError.

        Args:
            message (str): Description of the error.
        """
        super().__init__(message)


class TreeNotBuiltError(Id3Error, RuntimeError):
    """Raised when a tree is rendered before it has been built."""

    def __init__(self, message: str = "No decision tree built; call run() first") -> None:
        """Initialize TreeNotBuiltError.

        Args:
            message (str): Description of the error.
        """
        super().__init__(message)


class TreeInvariantError(Id3Error, AssertionError):
    """Raised when an internal invariant of the tree builder is violated."""


class TrainingTableError(Id3Error, ValueError):
    """Base exception for malformed training tables.

    Attributes:
        source (str | None): File name or other description of where the table
            was read from.
    """

    source: str | None

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize TrainingTableError.

        Args:
            message (str): Description of the error.
            source (str | None): Where the table was read from.
        """
        super().__init__(message)
        self.source = source

    def __repr__(self) -> str:
        """Return detailed representation for debugging.

        Returns:
            str: Representation including message and source.
        """
        return f"{self.__class__.__name__}(message={str(self)!r}, source={self.source!r})"


class EmptyTableError(TrainingTableError):
    """Raised when a training table has no header names."""

    def __init__(self, source: str | None = None) -> None:
        """Initialize EmptyTableError.

        Args:
            source (str | None): Where the table was read from.
        """
        super().__init__("Training table has no header line", source=source)


class DuplicateHeadersError(TrainingTableError):
    """Raised when a table with repeated header names is converted to a DataFrame.

    Attributes:
        headers (list[str]): The header list that contains duplicates.
        duplicate_headers (list[str]): The repeated names, each listed once.

    Examples:
        >>> err = DuplicateHeadersError(["Outlook", "Outlook", "Wind"])
        >>> err.duplicate_headers
        ['Outlook']
    """

    headers: list[str]
    duplicate_headers: list[str]

    def __init__(self, headers: list[str], source: str | None = None) -> None:
        """Initialize DuplicateHeadersError.

        Args:
            headers (list[str]): The header list containing duplicates.
            source (str | None): Where the table was read from.
        """
        seen: set[str] = set()
        duplicates: list[str] = []
        for header in headers:
            if header in seen and header not in duplicates:
                duplicates.append(header)
            seen.add(header)
        super().__init__(f"Duplicate header names are not allowed: {duplicates}", source=source)
        self.headers = list(headers)
        self.duplicate_headers = duplicates


class RowWidthError(TrainingTableError):
    """Raised when a row does not have exactly one value per header.

    Attributes:
        line_number (int): 1-indexed line number of the offending row.
        expected (int): Number of header names.
        actual (int): Number of values found on the row.

    Examples:
        >>> err = RowWidthError(line_number=3, expected=5, actual=4)
        >>> (err.expected, err.actual)
        (5, 4)
    """

    line_number: int
    expected: int
    actual: int

    def __init__(self, *, line_number: int, expected: int, actual: int, source: str | None = None) -> None:
        """Initialize RowWidthError.

        Args:
            line_number (int): 1-indexed line number of the offending row.
            expected (int): Number of header names.
            actual (int): Number of values found on the row.
            source (str | None): Where the table was read from.
        """
        super().__init__(
            f"Line {line_number}: expected {expected} values, got {actual}",
            source=source,
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual

    def __repr__(self) -> str:
        """Return detailed representation for debugging.

        Returns:
            str: Representation including line number and widths.
        """
        return (
            f"{self.__class__.__name__}(line_number={self.line_number!r}, expected={self.expected!r}, "
            f"actual={self.actual!r}, source={self.source!r})"
        )
