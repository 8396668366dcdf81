"""Public API surface for todogist."""

from todogist.config import load_config
from todogist.contracts.config import ProjectConfig, TodoGistConfig
from todogist.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ProviderError,
    PublishError,
    TodoGistError,
)
from todogist.contracts.fetcher import QueryFetcher
from todogist.contracts.records import ArchivePage, ProjectData, RawItem, RawSection
from todogist.contracts.task import ROOT_SECTION, ParsedContent, ProjectReport, ProjectResult, SectionMap, Task
from todogist.core import (
    ArchiveAggregator,
    build_section_map,
    filter_items,
    map_project_data,
    order_parents_first,
    parse_content,
)
from todogist.providers import TodoistClient, TodoistProvider
from todogist.publishers import GistPublisher
from todogist.sdk import SyncResult, TodoGist

__all__ = [
    "ROOT_SECTION",
    "ArchiveAggregator",
    "ArchivePage",
    "AuthenticationError",
    "ConfigError",
    "GistPublisher",
    "ParsedContent",
    "ProjectConfig",
    "ProjectData",
    "ProjectReport",
    "ProjectResult",
    "ProviderError",
    "PublishError",
    "QueryFetcher",
    "RawItem",
    "RawSection",
    "SectionMap",
    "SyncResult",
    "Task",
    "TodoGist",
    "TodoGistConfig",
    "TodoGistError",
    "TodoistClient",
    "TodoistProvider",
    "build_section_map",
    "filter_items",
    "load_config",
    "map_project_data",
    "order_parents_first",
    "parse_content",
]
