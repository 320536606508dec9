"""
Template copy — materialize the bundled template tree into a project.

Walks a source tree and reproduces it under a destination root.
Directories are always ensured; files are written when absent,
overwritten only in force mode, and skipped otherwise.

Channel-independent: notices are returned in a report and, when a
callback is given, streamed as each file is visited.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath

from agentland_docs.adapters.base import TreeAdapter
from agentland_docs.core.models.template import CopyAction, CopyNotice, CopyReport

logger = logging.getLogger(__name__)

NoticeCallback = Callable[[CopyNotice], None]


class SourceMissingError(Exception):
    """Raised when the template root does not exist."""

    def __init__(self, source: PurePath):
        self.source = source
        super().__init__(
            f"Templates directory not found: {source}. Package may be corrupted."
        )


def copy_tree(
    source: PurePath,
    destination: PurePath,
    overwrite: bool = False,
    *,
    adapter: TreeAdapter,
    on_notice: NoticeCallback | None = None,
) -> CopyReport:
    """Copy ``source`` to ``destination`` recursively.

    Args:
        source: Template root (directory or single file).
        destination: Where the copy of ``source`` lands.
        overwrite: Replace existing destination files (force mode).
        adapter: Tree access for both source and destination.
        on_notice: Called with each COPY/SKIP notice as it happens.

    Returns:
        CopyReport with one notice per visited file.

    Raises:
        SourceMissingError: If ``source`` does not exist.
        OSError: If a directory or file cannot be created. Files already
            written stay in place.
    """
    if not adapter.exists(source):
        raise SourceMissingError(source)

    report = CopyReport()
    root = destination if adapter.is_dir(source) else destination.parent

    def emit(notice: CopyNotice) -> None:
        report.add(notice)
        if on_notice is not None:
            on_notice(notice)

    _copy_entry(source, destination, overwrite, adapter, root, emit)

    logger.info(
        "Copied %s → %s: %d written, %d skipped",
        source, destination, report.written, report.skipped,
    )
    return report


def _copy_entry(
    source: PurePath,
    destination: PurePath,
    overwrite: bool,
    adapter: TreeAdapter,
    root: PurePath,
    emit: NoticeCallback,
) -> None:
    if adapter.is_dir(source):
        adapter.make_dirs(destination)
        for name in adapter.list_dir(source):
            _copy_entry(source / name, destination / name, overwrite, adapter, root, emit)
        return

    relative = destination.relative_to(root).as_posix()
    action = decide(adapter.exists(destination), overwrite)

    if action == CopyAction.SKIP:
        logger.debug("Skipping existing file %s", destination)
        emit(CopyNotice(action=action, path=relative))
        return

    adapter.make_dirs(destination.parent)
    adapter.copy_file(source, destination)
    emit(CopyNotice(action=action, path=relative))


def decide(exists: bool, overwrite: bool) -> CopyAction:
    """Copy decision for one regular file."""
    if not exists:
        return CopyAction.WRITE
    return CopyAction.OVERWRITE if overwrite else CopyAction.SKIP
