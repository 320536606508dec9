"""
Configuration models — questions, answers, replacements, and the
placeholder contract shared by the templates and the substitution engine.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DocumentKey = Literal["vision", "project_brief"]


class Question(BaseModel):
    """One interactive question, bound to the AnswerSet field it fills."""

    model_config = ConfigDict(frozen=True)

    field: str
    prompt: str


class AnswerSet(BaseModel):
    """Free-text answers of one configure session.

    Field declaration order is the order replacements are applied in.
    Every value is trimmed; an empty value means "leave the documents alone".
    """

    system_name: str = ""
    purpose: str = ""
    layers: str = ""
    boundary: str = ""
    non_goals: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def field_names(cls) -> list[str]:
        return list(cls.model_fields)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in self.field_names())


class Replacement(BaseModel):
    """A literal search/replace pair targeting one document."""

    model_config = ConfigDict(frozen=True)

    field: str
    document: DocumentKey
    search: str
    replace: str


class ContractDocuments(BaseModel):
    """Relative paths of the two target documents."""

    vision: str = "docs/vision.md"
    project_brief: str = "CLAUDE.md"

    def items(self) -> list[tuple[DocumentKey, str]]:
        return [("vision", self.vision), ("project_brief", self.project_brief)]


class ContractPlaceholders(BaseModel):
    """Literal placeholder texts, one per answer field."""

    system_name: str = Field(min_length=1)
    purpose: str = Field(min_length=1)
    layers: str = Field(min_length=1)
    boundary: str = Field(min_length=1)
    non_goals: str = Field(min_length=1)


class PlaceholderContract(BaseModel):
    """Versioned agreement between the template files and the engine.

    If a template's placeholder text changes, this contract must change
    with it, otherwise the engine no longer finds what it replaces.
    """

    version: int = 1
    documents: ContractDocuments = Field(default_factory=ContractDocuments)
    placeholders: ContractPlaceholders
