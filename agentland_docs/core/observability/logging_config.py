"""
Logging configuration for the agentland-docs CLI.

COPY/SKIP/Updated lines are printed by the CLI; logging only carries
diagnostics, on stderr and optionally in AGENTLAND_DOCS_LOG_FILE.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "AGENTLAND_DOCS_LOG_LEVEL"
LOG_FILE_ENV = "AGENTLAND_DOCS_LOG_FILE"

_FMT_CONSOLE = "%(levelname)s: %(message)s"
_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s — %(message)s"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the log level: --debug > --verbose > --quiet > env var > WARNING."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> None:
    """Replace the root handlers with a stderr handler and an optional file."""
    console = logging.StreamHandler(sys.stderr)
    fmt = _FMT_DETAILED if level <= logging.DEBUG else _FMT_CONSOLE
    console.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.handlers[:] = [console]
    root.setLevel(level)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FMT_DETAILED))
        root.addHandler(fh)

    # Logging must never take the CLI down
    logging.raiseExceptions = False
