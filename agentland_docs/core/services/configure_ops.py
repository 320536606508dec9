"""
Configure — prompted text substitution in the copied documents.

Five questions are asked in order.  Each non-empty answer turns into
one or more literal search/replace pairs, which are then applied to
the vision document and the project brief.

Split into three steps so each can be exercised on its own:

    answers = collect_answers(ask)                    # prompting
    pairs = derive_replacements(answers, contract)    # pure
    result = apply_replacements(pairs, root, ...)     # I/O
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import PurePath

from agentland_docs.adapters.base import TreeAdapter
from agentland_docs.core.models.answers import (
    AnswerSet,
    PlaceholderContract,
    Question,
    Replacement,
)

logger = logging.getLogger(__name__)

AskCallback = Callable[[str], str]

PURPOSE_PREFIX = "The long-term objective is to "

QUESTIONS: tuple[Question, ...] = (
    Question(field="system_name", prompt="What is the name of your system or project?"),
    Question(field="purpose", prompt="Describe its purpose in one sentence"),
    Question(
        field="layers",
        prompt="List the main architectural layers (comma-separated, e.g. API, Domain, Storage)",
    ),
    Question(field="boundary", prompt="State one boundary rule between layers"),
    Question(field="non_goals", prompt="List the non-goals (comma-separated)"),
)


@dataclass
class ConfigureResult:
    """Outcome of one configure session."""

    documents_updated: list[str] = field(default_factory=list)
    documents_missing: list[str] = field(default_factory=list)
    missing_placeholders: list[tuple[str, str]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.documents_updated)

    def to_dict(self) -> dict:
        return {
            "documents_updated": self.documents_updated,
            "documents_missing": self.documents_missing,
            "missing_placeholders": [
                {"field": f, "document": d} for f, d in self.missing_placeholders
            ],
        }


# ═══════════════════════════════════════════════════════════════════
#  Prompting
# ═══════════════════════════════════════════════════════════════════


def collect_answers(ask: AskCallback) -> AnswerSet:
    """Ask every question once, in order, and gather the answers."""
    values = {}
    for question in QUESTIONS:
        values[question.field] = ask(question.prompt)
    return AnswerSet.model_validate(values)


# ═══════════════════════════════════════════════════════════════════
#  Derivation
# ═══════════════════════════════════════════════════════════════════


def split_items(raw: str) -> list[str]:
    """Split a comma-separated answer, trimming and dropping empty items."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def derive_replacements(
    answers: AnswerSet,
    contract: PlaceholderContract,
) -> list[Replacement]:
    """Turn answers into search/replace pairs, in field-declaration order."""
    ph = contract.placeholders
    pairs: list[Replacement] = []

    if answers.system_name:
        for doc in ("vision", "project_brief"):
            pairs.append(Replacement(
                field="system_name",
                document=doc,
                search=ph.system_name,
                replace=_rewrap(ph.system_name, answers.system_name),
            ))

    if answers.purpose:
        pairs.append(Replacement(
            field="purpose",
            document="vision",
            search=ph.purpose,
            replace=PURPOSE_PREFIX + answers.purpose,
        ))

    layers = split_items(answers.layers)
    if layers:
        pairs.append(Replacement(
            field="layers",
            document="project_brief",
            search=ph.layers,
            replace="\n".join(f"- {item} = [role]" for item in layers),
        ))

    if answers.boundary:
        pairs.append(Replacement(
            field="boundary",
            document="project_brief",
            search=ph.boundary,
            replace=f"- {answers.boundary}",
        ))

    non_goals = split_items(answers.non_goals)
    if non_goals:
        pairs.append(Replacement(
            field="non_goals",
            document="vision",
            search=ph.non_goals,
            replace="\n".join(f"- {item}" for item in non_goals),
        ))

    return pairs


def _rewrap(token: str, value: str) -> str:
    """Put ``value`` inside the emphasis markup surrounding ``token``.

    ``**[System Name]**`` → ``**<value>**``.  A token without brackets
    is replaced by the bare value.
    """
    start, end = token.find("["), token.rfind("]")
    if start == -1 or end < start:
        return value
    return token[:start] + value + token[end + 1:]


# ═══════════════════════════════════════════════════════════════════
#  Application
# ═══════════════════════════════════════════════════════════════════


def apply_replacements(
    replacements: list[Replacement],
    root: PurePath,
    *,
    adapter: TreeAdapter,
    contract: PlaceholderContract,
) -> ConfigureResult:
    """Apply the pairs to the target documents under ``root``.

    Each document is read once, patched with every pair that targets
    it (global literal replacement, in list order) and written back in
    full, only if at least one search text was found.  Multi-line
    placeholders and replacements follow the document's line endings
    (CRLF if it contains any).  A missing document is skipped without
    error.
    """
    result = ConfigureResult()

    for key, rel_path in contract.documents.items():
        pairs = [r for r in replacements if r.document == key]
        if not pairs:
            continue

        path = root / rel_path
        if not adapter.exists(path):
            logger.debug("Target document %s not found, skipping", rel_path)
            result.documents_missing.append(rel_path)
            continue

        text = adapter.read_text(path)
        newline = "\r\n" if "\r\n" in text else "\n"
        hits = 0
        for pair in pairs:
            search = pair.search.replace("\n", newline)
            count = text.count(search)
            if count == 0:
                logger.warning(
                    "Placeholder for '%s' not found in %s; template and contract may have drifted",
                    pair.field, rel_path,
                )
                result.missing_placeholders.append((pair.field, rel_path))
                continue
            text = text.replace(search, pair.replace.replace("\n", newline))
            hits += count
            logger.debug("Replaced %d occurrence(s) of '%s' in %s", count, pair.field, rel_path)

        if hits:
            adapter.write_text(path, text)
            result.documents_updated.append(rel_path)

    return result


def configure(
    answers: AnswerSet,
    root: PurePath,
    *,
    adapter: TreeAdapter,
    contract: PlaceholderContract | None = None,
) -> ConfigureResult:
    """Derive replacements from ``answers`` and apply them under ``root``."""
    if contract is None:
        from agentland_docs.core.config.loader import load_contract

        contract = load_contract()

    if answers.is_empty():
        logger.info("No answers given, documents left untouched")
        return ConfigureResult()

    replacements = derive_replacements(answers, contract)
    return apply_replacements(replacements, root, adapter=adapter, contract=contract)
