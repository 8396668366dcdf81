"""Project payload to done/pending partition."""

from __future__ import annotations

from todogist.contracts.records import ProjectData
from todogist.contracts.task import ProjectItems, ProjectResult, SectionMap
from todogist.core.items import filter_items


def map_project_data(
    data: ProjectData,
    section_map: SectionMap | None = None,
    *,
    reorder: bool = False,
) -> tuple[ProjectResult, list[int]]:
    """Split a project's retained tasks into done and pending.

    Relative order is preserved within each partition.
    """
    tasks, category_ids = filter_items(data.items, section_map, reorder=reorder)

    items = ProjectItems()
    for task in tasks:
        if task.checked:
            items.done.append(task)
        else:
            items.pending.append(task)

    return ProjectResult(name=data.project.name, items=items), category_ids
