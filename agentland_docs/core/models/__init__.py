"""
Domain models — Pydantic types for templates and configuration.

All models are re-exported here for convenient access:

    from agentland_docs.core.models import AnswerSet, CopyReport, PlaceholderContract
"""

from agentland_docs.core.models.answers import (
    AnswerSet,
    ContractDocuments,
    ContractPlaceholders,
    PlaceholderContract,
    Question,
    Replacement,
)
from agentland_docs.core.models.template import CopyAction, CopyNotice, CopyReport

__all__ = [
    # answers.py
    "AnswerSet",
    "ContractDocuments",
    "ContractPlaceholders",
    # template.py
    "CopyAction",
    "CopyNotice",
    "CopyReport",
    "PlaceholderContract",
    "Question",
    "Replacement",
]
