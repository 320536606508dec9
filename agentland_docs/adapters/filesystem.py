"""
Filesystem adapter — the real disk behind the TreeAdapter protocol.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path, PurePath

from agentland_docs.adapters.base import TreeAdapter

logger = logging.getLogger(__name__)


class FilesystemAdapter(TreeAdapter):
    """File and directory operations on the local disk."""

    @property
    def name(self) -> str:
        return "filesystem"

    def exists(self, path: PurePath) -> bool:
        return Path(path).exists()

    def is_dir(self, path: PurePath) -> bool:
        return Path(path).is_dir()

    def list_dir(self, path: PurePath) -> list[str]:
        return sorted(p.name for p in Path(path).iterdir())

    def read_bytes(self, path: PurePath) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        Path(path).write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def make_dirs(self, path: PurePath) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, source: PurePath, destination: PurePath) -> None:
        """Copy file contents byte-for-byte (permission bits are not copied)."""
        shutil.copyfile(Path(source), Path(destination))
        logger.debug("Copied %s → %s", source, destination)
