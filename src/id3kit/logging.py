"""Logging utilities for id3kit.

This module provides a custom TREE_BUILD log level and a handle for enabling
and disabling id3kit logging with loguru.

Note:
    Importing this module removes loguru's default stderr handler (ID 0) so
    that ``enable_logging()`` does not print every record twice. If your
    application has already replaced handler 0 before importing id3kit, the
    removal is a no-op (the ``ValueError`` is suppressed).
"""

from __future__ import annotations

import contextlib
import sys
import threading
import warnings
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

with contextlib.suppress(ValueError):
    logger.remove(0)

# Engine operations (set_data, run, clear) are logged at this level.
TREE_BUILD_LEVEL: Final[str] = "TREE_BUILD"
TREE_BUILD_LEVEL_NUMBER: Final[int] = 25  # Between INFO (20) and WARNING (30)


def _register_tree_build_level() -> None:
    """Register the TREE_BUILD custom log level with loguru.

    If the level already exists with a different numeric value a UserWarning
    is emitted, since loguru does not allow an existing level to be renumbered.
    """
    try:
        existing_level = logger.level(TREE_BUILD_LEVEL)
    except ValueError:
        logger.level(TREE_BUILD_LEVEL, no=TREE_BUILD_LEVEL_NUMBER, icon="🌳")
    else:
        if existing_level.no != TREE_BUILD_LEVEL_NUMBER:
            msg = (
                f"TREE_BUILD level already registered with numeric value {existing_level.no},"
                f" expected {TREE_BUILD_LEVEL_NUMBER}"
            )
            warnings.warn(msg, stacklevel=2)


_register_tree_build_level()

type LogLevel = Literal[
    "TRACE",
    "DEBUG",
    "INFO",
    "TREE_BUILD",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

type LogFormat = Literal["short", "full"]


class LoggingHandle:
    """Handle for managing the lifetime of one id3kit log handler.

    Examples:
        >>> with enable_logging(level="DEBUG"):  # doctest: +SKIP
        ...     ID3().set_data(rows, "PlayTennis", headers)

        >>> handle = enable_logging()  # doctest: +SKIP
        >>> handle.disable()  # doctest: +SKIP
    """

    _active_ids: ClassVar[set[int]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, handler_id: int) -> None:
        """Initialize the logging handle.

        Args:
            handler_id (int): The loguru handler ID from logger.add().
        """
        self.handler_id: int | None = handler_id
        with LoggingHandle._lock:
            LoggingHandle._active_ids.add(handler_id)

    def disable(self) -> None:
        """Remove the handler associated with this handle.

        When this is the last active handle, ``logger.disable("id3kit")`` is
        called so that id3kit records are suppressed again.
        """
        with LoggingHandle._lock:
            if self.handler_id is None:
                return
            LoggingHandle._active_ids.discard(self.handler_id)
            with contextlib.suppress(ValueError):
                logger.remove(self.handler_id)
            self.handler_id = None
            if not LoggingHandle._active_ids:
                logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        """Enter context manager.

        Returns:
            LoggingHandle: This handle instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager and disable logging."""
        self.disable()

    @classmethod
    def get_active_handle_count(cls) -> int:
        """Return the number of currently active logging handles.

        Returns:
            int: Count of active handles that have not been disabled.
        """
        with cls._lock:
            return len(cls._active_ids)


def enable_logging(
    *,
    level: LogLevel = TREE_BUILD_LEVEL,
    log_format: LogFormat = "short",
) -> LoggingHandle:
    """Enable id3kit logging on stderr.

    Args:
        level (LogLevel): Minimum log level to display. Defaults to
            "TREE_BUILD", which surfaces engine operations. Use "DEBUG" to see
            every split decision made while the tree is grown.
        log_format (LogFormat): "short" shows only the function name; "full"
            adds module and line number.

    Returns:
        LoggingHandle: Independent handle for managing the logging handler.
    """
    logger.enable(PACKAGE_NAME)

    if log_format == "short":
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <10}</level> | "  # noqa: RUF027 - loguru format string
            "<cyan>{function}</cyan> - "
            "<level>{message}</level> {extra}"
        )
    else:  # "full"
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <10}</level> | "  # noqa: RUF027 - loguru format string
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level> {extra}"
        )

    handler_id = logger.add(
        sys.stderr,
        level=level,
        filter=_is_id3kit_record,
        format=format_str,
    )

    return LoggingHandle(handler_id)


def _is_id3kit_record(record: Record) -> bool:
    """Pass only records emitted from within the id3kit package.

    Args:
        record (Record): The loguru Record object to filter.

    Returns:
        bool: True if the record originates from id3kit.
    """
    name = record["name"]
    return name is not None and name.startswith(PACKAGE_NAME)
