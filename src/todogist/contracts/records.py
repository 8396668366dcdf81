"""Raw Sync API record shapes.

These models mirror the JSON payloads returned by the Todoist Sync API. They
are scoped to a single fetch call and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RawItem(BaseModel):
    id: int
    parent_id: int | None = None
    section_id: int | None = None
    content: str
    checked: bool = False
    date_added: str
    priority: int = 1


class RawSection(BaseModel):
    id: int
    name: str
    project_id: int | None = None


class RawProject(BaseModel):
    id: int | None = None
    name: str


class ProjectData(BaseModel):
    """Payload of ``projects/get_data``."""

    project: RawProject
    items: list[RawItem] = Field(default_factory=list)


class ArchivePage(BaseModel):
    """One page of ``archive/items``.

    Successive pages of the same query are merged by concatenating ``items``.
    """

    items: list[RawItem] = Field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None
