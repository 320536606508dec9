"""Adapters — tree access for the copier and the substitution engine.

Public re-exports for convenient access.
"""

from agentland_docs.adapters.base import TreeAdapter
from agentland_docs.adapters.filesystem import FilesystemAdapter
from agentland_docs.adapters.memory import MemoryAdapter

__all__ = [
    "FilesystemAdapter",
    "MemoryAdapter",
    "TreeAdapter",
]
