"""Section id to display-name resolution."""

from __future__ import annotations

from collections.abc import Iterable

from todogist.contracts.records import RawSection
from todogist.contracts.task import ROOT_SECTION, SectionMap
from todogist.core.content import IGNORE_MARK, parse_content


def root_section_map() -> SectionMap:
    return {None: ROOT_SECTION}


def is_ignored_section(name: str) -> bool:
    return name.strip().endswith(IGNORE_MARK)


def build_section_map(sections: Iterable[RawSection], project_id: int | None = None) -> SectionMap:
    """Build a :data:`SectionMap` from a flat list of sections.

    Sections whose name ends with the ignore mark are left out, so items
    filed under them later fail the section-membership check. The root
    section is always present.
    """
    section_map = root_section_map()
    for section in sections:
        if project_id is not None and section.project_id != project_id:
            continue
        if is_ignored_section(section.name):
            continue
        section_map[section.id] = parse_content(section.name)
    return section_map
