"""Single-pass filtering of a flat, parent-ordered item list.

Items arrive as a flat list in which children are expected to follow their
parent. One left-to-right pass decides, per item, whether it becomes a
:class:`Task`, is recorded as a category marker, or is dropped:

* items whose section is not in the section map are dropped;
* items ending in the ignore mark (optionally followed by ``:``) are dropped
  and their children are skipped;
* items ending in ``:`` are category markers: never emitted, ids recorded.

Skip tracking is a single scalar, so only one skipped subtree is active at a
time and only its direct children are dropped. Grandchildren are dropped only
when the intermediate level is a category marker, which carries the skip one
level further down. Use :func:`order_parents_first` when the input order is
not already depth-first.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from todogist.contracts.records import RawItem
from todogist.contracts.task import SectionMap, Task
from todogist.core.content import IGNORE_MARK, format_date, parse_content
from todogist.core.sections import root_section_map

_IGNORE_ITEM_RE = re.compile(re.escape(IGNORE_MARK) + r":?\Z")
_CATEGORY_ITEM_RE = re.compile(r":\Z")
_NO_SKIP = object()


def is_ignored_item(content: str) -> bool:
    return _IGNORE_ITEM_RE.search(content) is not None


def is_category_item(content: str) -> bool:
    return _CATEGORY_ITEM_RE.search(content) is not None


def format_item(item: RawItem) -> Task:
    return Task(
        id=item.id,
        parent_id=item.parent_id,
        section_id=item.section_id,
        checked=bool(item.checked),
        date_added=format_date(item.date_added),
        priority=item.priority,
        content=parse_content(item.content),
    )


def order_parents_first(items: Iterable[RawItem]) -> list[RawItem]:
    """Return *items* in depth-first order, each parent before its subtree.

    Siblings keep their input order. Items whose parent is not in the list are
    treated as roots at their input position. The result equals the input
    when it is already depth-first ordered.
    """
    items = list(items)
    known_ids = {item.id for item in items}
    children: dict[int, list[int]] = {}
    roots: list[int] = []
    for index, item in enumerate(items):
        if item.parent_id is not None and item.parent_id in known_ids and item.parent_id != item.id:
            children.setdefault(item.parent_id, []).append(index)
        else:
            roots.append(index)

    ordered: list[RawItem] = []
    visited: set[int] = set()
    stack = list(reversed(roots))
    while stack:
        index = stack.pop()
        if index in visited:
            continue
        visited.add(index)
        ordered.append(items[index])
        stack.extend(reversed(children.get(items[index].id, [])))

    # Parent cycles are unreachable from any root; keep them in input order.
    ordered.extend(item for index, item in enumerate(items) if index not in visited)
    return ordered


def filter_items(
    items: Iterable[RawItem],
    section_map: SectionMap | None = None,
    *,
    reorder: bool = False,
) -> tuple[list[Task], list[int]]:
    """Filter and format *items*.

    Args:
        items: Flat item list, parents before children.
        section_map: Allowed sections. Defaults to the root section only.
        reorder: Apply :func:`order_parents_first` before filtering.

    Returns:
        Tuple of (retained tasks, category marker ids).
    """
    if section_map is None:
        section_map = root_section_map()
    if reorder:
        items = order_parents_first(items)

    tasks: list[Task] = []
    category_ids: list[int] = []
    last_skipped_parent_id: object = _NO_SKIP

    for item in items:
        if item.section_id not in section_map:
            continue

        if is_ignored_item(item.content):
            last_skipped_parent_id = item.id
            continue

        is_category = is_category_item(item.content)
        parent_skipped = item.parent_id == last_skipped_parent_id

        if not (parent_skipped or is_category):
            tasks.append(format_item(item))

        if item.parent_id != last_skipped_parent_id:
            last_skipped_parent_id = _NO_SKIP

        if is_category:
            category_ids.append(item.id)
            if parent_skipped:
                last_skipped_parent_id = item.id

    return tasks, category_ids
