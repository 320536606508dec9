"""
Shared test fixtures and configuration.
"""

from pathlib import Path, PurePosixPath

import pytest

from agentland_docs.adapters.memory import MemoryAdapter
from agentland_docs.core.config.loader import BUNDLED_TEMPLATES_DIR, load_contract
from agentland_docs.core.models.answers import PlaceholderContract


@pytest.fixture
def templates_dir() -> Path:
    """Return the template tree bundled with the package."""
    return BUNDLED_TEMPLATES_DIR


@pytest.fixture
def contract() -> PlaceholderContract:
    """Return the bundled placeholder contract."""
    return load_contract()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """An empty project directory that is also the CWD."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.delenv("AGENTLAND_DOCS_TEMPLATES_DIR", raising=False)
    return root


@pytest.fixture
def memory_tree(templates_dir: Path) -> MemoryAdapter:
    """In-memory tree holding a copy of the bundled templates under /tpl."""
    adapter = MemoryAdapter()
    for path in sorted(templates_dir.rglob("*")):
        if path.is_file():
            rel = path.relative_to(templates_dir).as_posix()
            adapter.add_file(PurePosixPath("/tpl") / rel, path.read_bytes())
    return adapter
