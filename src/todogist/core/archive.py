"""Archived item aggregation across paginated ``archive/items`` queries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable

from pydantic import ValidationError

from todogist.contracts.exceptions import ProviderError
from todogist.contracts.fetcher import QueryFetcher
from todogist.contracts.records import ArchivePage, RawItem
from todogist.contracts.task import SectionMap, Task
from todogist.core.items import filter_items
from todogist.core.sections import root_section_map

_LOG = logging.getLogger(__name__)

ARCHIVE_ITEMS_PATH = "archive/items"


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"The argument ({name}) must be an 'int' ({type(value).__name__})")
    return value


def _parse_page(payload: object) -> ArchivePage:
    try:
        return ArchivePage.model_validate(payload)
    except ValidationError as exc:
        raise ProviderError(f"Unexpected ArchivePage payload: {exc}") from exc


def dedupe_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Keep the first task for each id."""
    seen: set[int] = set()
    unique: list[Task] = []
    for task in tasks:
        if task.id in seen:
            continue
        seen.add(task.id)
        unique.append(task)
    return unique


class ArchiveAggregator:
    """Fetches archived items by project, section and ancestor item.

    Every query follows its cursor until the endpoint reports no more pages.
    Queries for different dimensions run concurrently; the first failure
    propagates and no partial result is returned.
    """

    def __init__(self, fetcher: QueryFetcher, *, dedupe: bool = False, reorder: bool = False) -> None:
        self._fetcher = fetcher
        self._dedupe = dedupe
        self._reorder = reorder

    async def fetch_archived_items(self, param_key: str, param_value: str) -> ArchivePage:
        if not isinstance(param_key, str) or not param_key.strip():
            raise TypeError(f"The first argument (param_key) must be a non-empty 'str' ({type(param_key).__name__})")
        if not isinstance(param_value, str):
            raise TypeError(f"The second argument (param_value) must be a 'str' ({type(param_value).__name__})")

        params: dict[str, str | None] = {param_key: param_value}
        page = _parse_page(await self._fetcher.post_query(ARCHIVE_ITEMS_PATH, dict(params)))
        items: list[RawItem] = list(page.items)
        pages = 1

        while page.has_more:
            params["cursor"] = page.next_cursor
            page = _parse_page(await self._fetcher.post_query(ARCHIVE_ITEMS_PATH, dict(params)))
            items.extend(page.items)
            pages += 1

        _LOG.debug("Fetched %d archived item(s) for %s=%s in %d page(s)", len(items), param_key, param_value, pages)
        return ArchivePage(items=items, has_more=False, next_cursor=page.next_cursor)

    async def items_under_project(self, project_id: int) -> ArchivePage:
        return await self.fetch_archived_items("project_id", str(_require_int("project_id", project_id)))

    async def items_under_section(self, section_id: int) -> ArchivePage:
        return await self.fetch_archived_items("section_id", str(_require_int("section_id", section_id)))

    async def items_under_parent(self, parent_id: int) -> ArchivePage:
        return await self.fetch_archived_items("parent_id", str(_require_int("parent_id", parent_id)))

    async def archived_tasks(
        self,
        project_id: int,
        section_map: SectionMap | None = None,
        parent_ids: Iterable[int] | None = None,
    ) -> list[Task]:
        """Collect archived tasks of a project.

        Issues one query for the project, one per non-root section in
        *section_map* and one per id in *parent_ids*. Each result set is
        filtered against *section_map*; results are concatenated in that
        query order. An item reachable through several queries appears once
        per query unless the aggregator was built with ``dedupe=True``.
        """
        _require_int("project_id", project_id)
        if section_map is None:
            section_map = root_section_map()

        section_ids = [section_id for section_id in section_map if section_id is not None]
        queries: list[Awaitable[ArchivePage]] = [self.items_under_project(project_id)]
        queries.extend(self.items_under_section(section_id) for section_id in section_ids)
        queries.extend(self.items_under_parent(parent_id) for parent_id in parent_ids or ())

        pages = await asyncio.gather(*queries)

        tasks = [task for page in pages for task in self._tasks_from_page(page, section_map)]
        if self._dedupe:
            tasks = dedupe_tasks(tasks)
        _LOG.debug("Collected %d archived task(s) for project %s from %d query(ies)", len(tasks), project_id, len(pages))
        return tasks

    def _tasks_from_page(self, page: ArchivePage, section_map: SectionMap) -> list[Task]:
        tasks, _ = filter_items(page.items, section_map, reorder=self._reorder)
        return tasks
