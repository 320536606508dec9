"""
Configuration loader — template root resolution and the placeholder contract.

The placeholder contract ships next to this module as
``placeholders.yml``.  It is read with YAML, validated against the
Pydantic schema, and returned as a typed model.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from agentland_docs.core.models.answers import PlaceholderContract

logger = logging.getLogger(__name__)

# Environment override for the bundled template tree
TEMPLATES_DIR_ENV = "AGENTLAND_DOCS_TEMPLATES_DIR"

CONTRACT_FILE = Path(__file__).parent / "placeholders.yml"
BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"


class ConfigError(Exception):
    """Raised when the placeholder contract is invalid or missing."""


def resolve_templates_dir(override: Path | str | None = None) -> Path:
    """Return the template root to copy from.

    Precedence: explicit ``override`` > ``AGENTLAND_DOCS_TEMPLATES_DIR`` >
    the tree bundled with the package.  Existence is not checked here;
    the copier reports a missing root.
    """
    if override:
        return Path(override)
    env_value = os.environ.get(TEMPLATES_DIR_ENV, "").strip()
    if env_value:
        logger.debug("Template root from %s: %s", TEMPLATES_DIR_ENV, env_value)
        return Path(env_value)
    return BUNDLED_TEMPLATES_DIR


def load_contract(path: Path | None = None) -> PlaceholderContract:
    """Load and validate the placeholder contract.

    Args:
        path: Explicit contract file. Defaults to the bundled one.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    path = path or CONTRACT_FILE

    if not path.is_file():
        raise ConfigError(f"Placeholder contract not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        contract = PlaceholderContract.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid placeholder contract: {e}") from e

    logger.debug("Loaded placeholder contract v%d from %s", contract.version, path)
    return contract
