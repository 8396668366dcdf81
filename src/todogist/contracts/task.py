"""Normalized, presentation-ready task contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel

ROOT_SECTION = ":root"


class ParsedContent(BaseModel):
    """Structured form of a free-text content field.

    Unset fields are omitted on serialization.
    """

    text: str | None = None
    tag: str | None = None
    link: str | None = None

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value}


SectionMap = dict[int | None, ParsedContent | str]
"""Section id to display name. The ``None`` key is the root section."""


class Task(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    parent_id: int | None = None
    section_id: int | None = None
    checked: bool
    date_added: str
    priority: int
    content: ParsedContent


class ProjectItems(BaseModel):
    done: list[Task] = Field(default_factory=list)
    pending: list[Task] = Field(default_factory=list)


class ProjectResult(BaseModel):
    name: str
    items: ProjectItems = Field(default_factory=ProjectItems)


class ProjectReport(BaseModel):
    """Everything gathered for one configured project."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: int
    result: ProjectResult
    category_ids: list[int] = Field(default_factory=list)
    archived: list[Task] = Field(default_factory=list)
