"""
Init use case — copy the templates, then optionally configure them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from agentland_docs.adapters.base import TreeAdapter
from agentland_docs.adapters.filesystem import FilesystemAdapter
from agentland_docs.core.config.loader import load_contract, resolve_templates_dir
from agentland_docs.core.models.template import CopyReport
from agentland_docs.core.services.configure_ops import (
    AskCallback,
    ConfigureResult,
    collect_answers,
    configure as configure_documents,
)
from agentland_docs.core.services.template_copy import NoticeCallback, copy_tree

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Result of an init run."""

    templates_dir: Path
    project_root: Path
    copy: CopyReport
    configure: ConfigureResult | None = None
    configure_declined: bool = False

    @property
    def configured(self) -> bool:
        return self.configure is not None

    def to_dict(self) -> dict:
        return {
            "templates_dir": str(self.templates_dir),
            "project_root": str(self.project_root),
            "copy": self.copy.to_dict(),
            "configure": self.configure.to_dict() if self.configure else None,
            "configure_declined": self.configure_declined,
        }


def run_init(
    project_root: Path,
    *,
    force: bool = False,
    configure: bool = True,
    confirm: Callable[[], bool] | None = None,
    ask: AskCallback | None = None,
    on_notice: NoticeCallback | None = None,
    templates_dir: Path | None = None,
    adapter: TreeAdapter | None = None,
) -> InitResult:
    """Materialize the templates into ``project_root``.

    Args:
        project_root: Destination directory (normally the CWD).
        force: Overwrite existing files.
        configure: Run the prompted substitution step after copying.
        confirm: Asked once before configuring; declining skips it.
            Treated as accepted when omitted.
        ask: Answers one question prompt. Required when configuring.
        on_notice: Receives each COPY/SKIP notice as it happens.
        templates_dir: Template root override.
        adapter: Tree access (defaults to the real filesystem).

    Raises:
        SourceMissingError: The template root does not exist.
        ConfigError: The placeholder contract is missing or invalid.
        OSError: Any filesystem failure while copying or configuring.
    """
    adapter = adapter or FilesystemAdapter()
    source = resolve_templates_dir(templates_dir)

    logger.info("Initializing %s from %s (force=%s)", project_root, source, force)
    report = copy_tree(source, project_root, force, adapter=adapter, on_notice=on_notice)
    result = InitResult(templates_dir=source, project_root=project_root, copy=report)

    if not configure:
        return result

    if confirm is not None and not confirm():
        result.configure_declined = True
        return result

    if ask is None:
        raise ValueError("An 'ask' callback is required to configure the documents")

    contract = load_contract()
    answers = collect_answers(ask)
    result.configure = configure_documents(
        answers, project_root, adapter=adapter, contract=contract,
    )
    return result
