"""
Template copy models — per-file decisions and the report of a copy run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CopyAction(str, Enum):
    """What the copier did with one destination file.

    Directories never get a decision: they are always ensured to exist.
    """

    WRITE = "write"
    OVERWRITE = "overwrite"
    SKIP = "skip"


class CopyNotice(BaseModel):
    """One status line emitted for a visited file.

    Attributes:
        action: The copy decision taken.
        path:   Destination path relative to the copy root (POSIX separators).
    """

    action: CopyAction
    path: str

    @property
    def skipped(self) -> bool:
        return self.action == CopyAction.SKIP

    def render(self) -> str:
        """Human-readable status line."""
        if self.skipped:
            return f"  SKIP: {self.path} (already exists, use --force to overwrite)"
        return f"  COPY: {self.path}"


class CopyReport(BaseModel):
    """Every notice of a copy run, in visit order."""

    notices: list[CopyNotice] = Field(default_factory=list)

    @property
    def written(self) -> int:
        return sum(1 for n in self.notices if not n.skipped)

    @property
    def skipped(self) -> int:
        return sum(1 for n in self.notices if n.skipped)

    def add(self, notice: CopyNotice) -> None:
        self.notices.append(notice)

    def paths(self, action: CopyAction | None = None) -> list[str]:
        """Notice paths, optionally filtered by action."""
        return [n.path for n in self.notices if action is None or n.action == action]

    def to_dict(self) -> dict:
        return {
            "written": self.written,
            "skipped": self.skipped,
            "notices": [n.model_dump(mode="json") for n in self.notices],
        }
