"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_TODOIST_BASE_URL = "https://api.todoist.com/sync/v8"
DEFAULT_GITHUB_API_URL = "https://api.github.com"


class ProjectConfig(BaseModel):
    id: int
    ancestor_ids: list[int] = Field(default_factory=list)
    include_archived: bool = True


class TodoGistConfig(BaseModel):
    projects: list[ProjectConfig] = Field(min_length=1)
    gist_id: str
    description: str = "Todoist tasks"
    filename: str = "todoist.json"
    todoist_token: str | None = None
    github_token: str | None = None
    todoist_base_url: str = DEFAULT_TODOIST_BASE_URL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    max_retries: int = Field(default=3, ge=0, le=10)
    dedupe_archived: bool = False
    reorder_items: bool = False

    model_config = {"frozen": True}

    @field_validator("gist_id", "filename")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("todoist_token", "github_token")
    @classmethod
    def normalize_token(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
