"""Demonstrates how to enable and configure logging in id3kit.

id3kit logging is disabled by default. Users opt in by calling ``enable_logging()``,
which returns a ``LoggingHandle``. The handle can be used as a context manager
(``with enable_logging(): ...``) or disabled manually via ``handle.disable()``.
When the last active handle is disabled, id3kit logging is automatically turned off.

Key concepts shown here:

- ``level``: the custom ``TREE_BUILD`` level (numeric value 25, between INFO and
  WARNING) surfaces engine operations and is the default. ``DEBUG`` adds one
  record per split decision.
- ``log_format``: ``"short"`` shows ``timestamp | level | function - message``;
  ``"full"`` adds the module and line number.
- Error logging: a rejected dataset is logged at WARNING before the exception
  reaches the caller.
"""

import sys
from pathlib import Path

from id3kit import ID3, enable_logging, load_training_table
from id3kit.exceptions import TargetAttributeNotFoundError

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "play_tennis.txt"

with enable_logging(level="DEBUG", log_format="full"):
    table = load_training_table(DATA_FILE)

    id3 = ID3()
    id3.set_data(table.rows, "PlayTennis", table.headers)
    id3.run()
    id3.print_text(sys.stdout)

    # Try an error to show error logging
    try:
        id3.set_data(table.rows, "Play", table.headers)
    except TargetAttributeNotFoundError as exc:
        print(f"\nCaught: {exc}\n")

# Logging is now disabled again
id3.set_dataframe(table.to_dataframe(), "PlayTennis")
id3.run()
id3.print_dot(sys.stdout, graph_name="PlayTennis")
