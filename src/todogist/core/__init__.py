"""Extraction, normalization and aggregation pipeline."""

from todogist.core.archive import ArchiveAggregator, dedupe_tasks
from todogist.core.content import format_date, parse_content
from todogist.core.items import filter_items, format_item, order_parents_first
from todogist.core.project import map_project_data
from todogist.core.sections import build_section_map, root_section_map

__all__ = [
    "ArchiveAggregator",
    "build_section_map",
    "dedupe_tasks",
    "filter_items",
    "format_date",
    "format_item",
    "map_project_data",
    "order_parents_first",
    "parse_content",
    "root_section_map",
]
