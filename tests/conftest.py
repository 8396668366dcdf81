"""Shared test fixtures for todogist tests."""

from __future__ import annotations

import pytest

from tests.fakes.fetcher import FakeFetcher
from todogist.contracts.config import TodoGistConfig


@pytest.fixture
def fetcher() -> FakeFetcher:
    """An empty FakeFetcher: every archive query returns a single empty page."""
    return FakeFetcher()


@pytest.fixture
def sample_config() -> TodoGistConfig:
    """A minimal valid TodoGistConfig."""
    return TodoGistConfig(
        projects=[{"id": 100, "ancestor_ids": [7]}],
        gist_id="gist-1",
        todoist_token="todoist-token",
        github_token="github-token",
    )
