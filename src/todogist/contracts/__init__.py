"""Public contracts shared across todogist layers."""

from todogist.contracts.config import ProjectConfig, TodoGistConfig
from todogist.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ProviderError,
    PublishError,
    TodoGistError,
)
from todogist.contracts.fetcher import QueryFetcher
from todogist.contracts.gist import GistFile
from todogist.contracts.progress import NullSyncProgress, SyncProgress
from todogist.contracts.records import ArchivePage, ProjectData, RawItem, RawProject, RawSection
from todogist.contracts.task import (
    ROOT_SECTION,
    ParsedContent,
    ProjectItems,
    ProjectReport,
    ProjectResult,
    SectionMap,
    Task,
)

__all__ = [
    "ROOT_SECTION",
    "ArchivePage",
    "AuthenticationError",
    "ConfigError",
    "GistFile",
    "NullSyncProgress",
    "ParsedContent",
    "ProjectConfig",
    "ProjectData",
    "ProjectItems",
    "ProjectReport",
    "ProjectResult",
    "ProviderError",
    "PublishError",
    "QueryFetcher",
    "RawItem",
    "RawProject",
    "RawSection",
    "SectionMap",
    "SyncProgress",
    "Task",
    "TodoGistConfig",
    "TodoGistError",
]
