"""Serialization of pipeline output into gist files."""

from __future__ import annotations

import json
from collections.abc import Iterable

from todogist.contracts.gist import GistFile
from todogist.contracts.task import ProjectReport


def render_reports(reports: Iterable[ProjectReport]) -> str:
    payload = [report.model_dump(mode="json", by_alias=True) for report in reports]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def build_gist_files(reports: Iterable[ProjectReport], *, filename: str) -> list[GistFile]:
    return [GistFile(filename=filename, content=render_reports(reports))]
