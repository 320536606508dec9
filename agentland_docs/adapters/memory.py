"""
Memory adapter — an in-memory tree behind the TreeAdapter protocol.

Used by tests to run the copier and the substitution engine without
touching the disk.  Mirrors the failure modes of the real filesystem
closely enough for those two services: reading a directory or a
missing file raises, writing into a missing directory raises.
"""

from __future__ import annotations

import errno
import os
from pathlib import PurePath, PurePosixPath

from agentland_docs.adapters.base import TreeAdapter


def _key(path: PurePath | str) -> PurePosixPath:
    return PurePosixPath(str(path).replace("\\", "/"))


def _oserror(cls: type[OSError], code: int, path: PurePosixPath) -> OSError:
    return cls(code, os.strerror(code), str(path))


class MemoryAdapter(TreeAdapter):
    """In-memory tree for testing.

    Starts with only the root directory.  Seed it with ``add_file``;
    parent directories are created implicitly.  Every write is recorded
    in ``write_log`` so tests can assert on what was (not) touched.
    """

    def __init__(self, files: dict[str, bytes | str] | None = None):
        self._files: dict[PurePosixPath, bytes] = {}
        self._dirs: set[PurePosixPath] = {PurePosixPath("/")}
        self._denied: set[PurePosixPath] = set()
        self._write_log: list[str] = []
        for path, content in (files or {}).items():
            self.add_file(path, content)

    @property
    def name(self) -> str:
        return "memory"

    @property
    def write_log(self) -> list[str]:
        """Paths written since construction (seeding is not recorded)."""
        return self._write_log

    # ── Seeding / inspection ────────────────────────────────────

    def add_file(self, path: PurePath | str, content: bytes | str) -> None:
        """Create a file (and its ancestors) without recording a write."""
        key = _key(path)
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._add_dirs(key.parent)
        self._files[key] = content

    def deny_writes(self, path: PurePath | str) -> None:
        """Make every later write to ``path`` fail with PermissionError."""
        self._denied.add(_key(path))

    def files(self) -> dict[str, bytes]:
        """Snapshot of every file, keyed by POSIX path string."""
        return {str(k): v for k, v in sorted(self._files.items())}

    # ── TreeAdapter ─────────────────────────────────────────────

    def exists(self, path: PurePath) -> bool:
        key = _key(path)
        return key in self._files or key in self._dirs

    def is_dir(self, path: PurePath) -> bool:
        return _key(path) in self._dirs

    def list_dir(self, path: PurePath) -> list[str]:
        key = _key(path)
        if key in self._files:
            raise _oserror(NotADirectoryError, errno.ENOTDIR, key)
        if key not in self._dirs:
            raise _oserror(FileNotFoundError, errno.ENOENT, key)
        names = {
            p.name
            for p in (*self._files, *self._dirs)
            if p.parent == key and p != key
        }
        return sorted(names)

    def read_bytes(self, path: PurePath) -> bytes:
        key = _key(path)
        if key in self._dirs:
            raise _oserror(IsADirectoryError, errno.EISDIR, key)
        if key not in self._files:
            raise _oserror(FileNotFoundError, errno.ENOENT, key)
        return self._files[key]

    def write_bytes(self, path: PurePath, data: bytes) -> None:
        key = _key(path)
        if key in self._denied:
            raise _oserror(PermissionError, errno.EACCES, key)
        if key in self._dirs:
            raise _oserror(IsADirectoryError, errno.EISDIR, key)
        if key.parent not in self._dirs:
            raise _oserror(FileNotFoundError, errno.ENOENT, key.parent)
        self._files[key] = bytes(data)
        self._write_log.append(str(key))

    def make_dirs(self, path: PurePath) -> None:
        key = _key(path)
        for candidate in (key, *key.parents):
            if candidate in self._files:
                raise _oserror(FileExistsError, errno.EEXIST, candidate)
            if candidate in self._denied:
                raise _oserror(PermissionError, errno.EACCES, candidate)
        self._add_dirs(key)

    def _add_dirs(self, key: PurePosixPath) -> None:
        self._dirs.add(key)
        self._dirs.update(key.parents)
