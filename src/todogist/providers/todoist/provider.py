"""Todoist service facade over the extraction pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from todogist.contracts.exceptions import ProviderError
from todogist.contracts.fetcher import QueryFetcher
from todogist.contracts.records import ProjectData, RawSection
from todogist.contracts.task import ProjectResult, SectionMap, Task
from todogist.core.archive import ArchiveAggregator
from todogist.core.project import map_project_data
from todogist.core.sections import build_section_map

_LOG = logging.getLogger(__name__)

SYNC_PATH = "sync"
PROJECT_DATA_PATH = "projects/get_data"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _require_project_id(project_id: object) -> int:
    if isinstance(project_id, bool) or not isinstance(project_id, int):
        raise TypeError(f"The argument (project_id) must be an 'int' ({type(project_id).__name__})")
    return project_id


class TodoistProvider:
    """Reads sections, project data and archived items through a fetcher."""

    def __init__(self, fetcher: QueryFetcher, *, dedupe_archived: bool = False, reorder_items: bool = False) -> None:
        self._fetcher = fetcher
        self._reorder_items = reorder_items
        self.archive = ArchiveAggregator(fetcher, dedupe=dedupe_archived, reorder=reorder_items)

    async def get_sections(self, project_id: int) -> list[RawSection]:
        _require_project_id(project_id)
        data = await self._fetcher.post_query(SYNC_PATH, {"sync_token": "*", "resource_types": '["sections"]'})
        raw_sections = data.get("sections") if isinstance(data, dict) else None
        if not isinstance(raw_sections, list):
            raise ProviderError("Missing/invalid list at key 'sections'")

        sections = [self._parse(RawSection, section) for section in raw_sections]
        if project_id:
            sections = [section for section in sections if section.project_id == project_id]
        return sections

    async def get_project_data(self, project_id: int) -> ProjectData:
        _require_project_id(project_id)
        data = await self._fetcher.post_query(PROJECT_DATA_PATH, {"project_id": str(project_id)})
        return self._parse(ProjectData, data)

    async def get_section_map(self, project_id: int) -> SectionMap:
        sections = await self.get_sections(project_id)
        section_map = build_section_map(sections)
        _LOG.debug("Project %s has %d visible section(s)", project_id, len(section_map) - 1)
        return section_map

    async def get_project_result(
        self, project_id: int, section_map: SectionMap | None = None
    ) -> tuple[ProjectResult, list[int]]:
        data = await self.get_project_data(project_id)
        return map_project_data(data, section_map, reorder=self._reorder_items)

    async def get_archived_tasks(
        self,
        project_id: int,
        section_map: SectionMap | None = None,
        parent_ids: Iterable[int] | None = None,
    ) -> list[Task]:
        return await self.archive.archived_tasks(project_id, section_map, parent_ids)

    @staticmethod
    def _parse(model: type[ModelT], payload: Any) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ProviderError(f"Unexpected {model.__name__} payload: {exc}") from exc
