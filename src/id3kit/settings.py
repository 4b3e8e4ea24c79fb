"""Environment-driven settings for the id3kit command line."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from id3kit.logging import LogLevel
from id3kit.render import DEFAULT_GAIN_PRECISION, DEFAULT_GRAPH_NAME, DEFAULT_TEXT_MARKER


class Id3Settings(BaseSettings):
    """Defaults for building and rendering trees, read from `ID3KIT_*` variables.

    Values may also come from a `.env` file in the working directory.
    Command-line options override them.

    Attributes:
        target (str): Name of the attribute to predict.
        text_marker (str): Indentation marker for the text rendering.
        gain_precision (int): Decimal places printed for information gains.
        graph_name (str): Name of the emitted Graphviz digraph.
        log_level (LogLevel): Minimum level of id3kit log records on stderr.

    Examples:
        >>> import os
        >>> os.environ["ID3KIT_TARGET"] = "Survived"  # doctest: +SKIP
        >>> Id3Settings().target  # doctest: +SKIP
        'Survived'
    """

    model_config = SettingsConfigDict(
        env_prefix="ID3KIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    target: str = Field(default="PlayTennis", min_length=1, description="Name of the attribute to predict.")
    text_marker: str = Field(
        default=DEFAULT_TEXT_MARKER,
        min_length=1,
        description="Indentation marker repeated once per depth level in the text rendering.",
    )
    gain_precision: int = Field(
        default=DEFAULT_GAIN_PRECISION,
        ge=0,
        description="Decimal places printed for information gains.",
    )
    graph_name: str = Field(default=DEFAULT_GRAPH_NAME, min_length=1, description="Name of the Graphviz digraph.")
    log_level: LogLevel = Field(default="WARNING", description="Minimum level of id3kit log records on stderr.")
