"""SDK composition root for todogist."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, Field

from todogist.auth import GITHUB_TOKEN_ENV, TODOIST_TOKEN_ENV, create_token_resolver
from todogist.contracts.config import ProjectConfig, TodoGistConfig
from todogist.contracts.fetcher import QueryFetcher
from todogist.contracts.gist import GistFile
from todogist.contracts.progress import NullSyncProgress, SyncProgress
from todogist.contracts.task import ProjectReport, Task
from todogist.providers.todoist import TodoistClient, TodoistProvider
from todogist.publishers import GistPublisher, build_gist_files

_LOG = logging.getLogger(__name__)

PHASE_COLLECT = "Collect"
PHASE_PUBLISH = "Publish"


class SyncResult(BaseModel):
    reports: list[ProjectReport] = Field(default_factory=list)
    files: list[GistFile] = Field(default_factory=list)
    status_code: int | None = None
    dry_run: bool = False


def _ancestor_ids(project: ProjectConfig, category_ids: list[int]) -> list[int]:
    return list(dict.fromkeys([*project.ancestor_ids, *category_ids]))


async def collect_project_report(provider: TodoistProvider, project: ProjectConfig) -> ProjectReport:
    """Run the whole extraction pipeline for one project.

    Archived items are looked up under the configured ancestors and under
    every category marker of the live project.
    """
    section_map = await provider.get_section_map(project.id)
    result, category_ids = await provider.get_project_result(project.id, section_map)

    archived: list[Task] = []
    if project.include_archived:
        archived = await provider.get_archived_tasks(
            project.id, section_map, _ancestor_ids(project, category_ids)
        )

    _LOG.info(
        "Project %s (%s): %d done, %d pending, %d archived",
        project.id,
        result.name,
        len(result.items.done),
        len(result.items.pending),
        len(archived),
    )
    return ProjectReport(project_id=project.id, result=result, category_ids=category_ids, archived=archived)


class TodoGist:
    def __init__(
        self,
        config: TodoGistConfig,
        *,
        progress: SyncProgress | None = None,
        fetcher_factory: Callable[[str], QueryFetcher] | None = None,
        publisher_factory: Callable[[str], GistPublisher] | None = None,
    ) -> None:
        self._config = config
        self._progress = progress or NullSyncProgress()
        self._fetcher_factory = fetcher_factory or self._default_fetcher
        self._publisher_factory = publisher_factory or self._default_publisher

    async def sync(self, *, dry_run: bool = False) -> SyncResult:
        reports = await self.collect()
        files = build_gist_files(reports, filename=self._config.filename)
        if dry_run:
            return SyncResult(reports=reports, files=files, dry_run=True)

        status_code = await self.publish(files)
        return SyncResult(reports=reports, files=files, status_code=status_code)

    async def collect(self) -> list[ProjectReport]:
        token = await create_token_resolver(self._config.todoist_token, env_variable=TODOIST_TOKEN_ENV).resolve()

        reports: list[ProjectReport] = []
        self._progress.phase_start(PHASE_COLLECT, total=len(self._config.projects))
        try:
            async with self._fetcher_factory(token) as fetcher:
                provider = TodoistProvider(
                    fetcher,
                    dedupe_archived=self._config.dedupe_archived,
                    reorder_items=self._config.reorder_items,
                )
                for project in self._config.projects:
                    reports.append(await collect_project_report(provider, project))
                    self._progress.item_done(PHASE_COLLECT)
        except BaseException as exc:
            self._progress.phase_error(PHASE_COLLECT, exc)
            raise
        self._progress.phase_done(PHASE_COLLECT)
        return reports

    async def publish(self, files: list[GistFile]) -> int:
        token = await create_token_resolver(self._config.github_token, env_variable=GITHUB_TOKEN_ENV).resolve()

        self._progress.phase_start(PHASE_PUBLISH)
        try:
            async with self._publisher_factory(token) as publisher:
                status_code = await publisher.update_gist(
                    self._config.gist_id,
                    description=self._config.description,
                    files=files,
                )
        except BaseException as exc:
            self._progress.phase_error(PHASE_PUBLISH, exc)
            raise
        self._progress.phase_done(PHASE_PUBLISH)
        _LOG.info("Gist %s updated (HTTP %d)", self._config.gist_id, status_code)
        return status_code

    def _default_fetcher(self, token: str) -> TodoistClient:
        return TodoistClient(
            token=token,
            base_url=self._config.todoist_base_url,
            max_retries=self._config.max_retries,
        )

    def _default_publisher(self, token: str) -> GistPublisher:
        return GistPublisher(
            token=token,
            api_url=self._config.github_api_url,
            max_retries=self._config.max_retries,
        )
