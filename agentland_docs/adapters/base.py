"""
Adapter base — the contract between the services and a directory tree.

The copier and the substitution engine only talk to a tree through
this protocol, never directly to ``pathlib``.  That keeps both of them
testable against an in-memory tree without touching the disk.

Unlike a receipt-returning adapter, a tree adapter lets I/O errors
propagate: every failure is fatal for the current run.
"""

from __future__ import annotations

import errno
from abc import ABC, abstractmethod
from pathlib import PurePath


class TreeAdapter(ABC):
    """Abstract base class for tree access.

    To create a new adapter:
        1. Subclass TreeAdapter
        2. Implement name and the six tree operations
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'filesystem', 'memory')."""

    @abstractmethod
    def exists(self, path: PurePath) -> bool:
        """Whether anything (file or directory) exists at ``path``."""

    @abstractmethod
    def is_dir(self, path: PurePath) -> bool:
        """Whether ``path`` is an existing directory."""

    @abstractmethod
    def list_dir(self, path: PurePath) -> list[str]:
        """Names of the direct entries of directory ``path``, sorted."""

    @abstractmethod
    def read_bytes(self, path: PurePath) -> bytes:
        """Full contents of the file at ``path``."""

    @abstractmethod
    def write_bytes(self, path: PurePath, data: bytes) -> None:
        """Replace the file at ``path`` with ``data``.

        The parent directory must already exist.
        """

    @abstractmethod
    def make_dirs(self, path: PurePath) -> None:
        """Create directory ``path`` and any missing ancestors."""

    def copy_file(self, source: PurePath, destination: PurePath) -> None:
        """Copy a file byte-for-byte.  The destination's parent must exist."""
        self.write_bytes(destination, self.read_bytes(source))

    def read_text(self, path: PurePath) -> str:
        """Decode a file as UTF-8 without newline translation.

        Undecodable content raises OSError so callers treat it like any
        other unreadable file.
        """
        try:
            return self.read_bytes(path).decode("utf-8")
        except UnicodeDecodeError as e:
            raise OSError(errno.EILSEQ, f"Not valid UTF-8 ({e.reason} at byte {e.start})", str(path)) from e

    def write_text(self, path: PurePath, content: str) -> None:
        """Encode ``content`` as UTF-8 and write it without newline translation."""
        self.write_bytes(path, content.encode("utf-8"))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
