"""Token resolver factory."""

from __future__ import annotations

from todogist.auth.base import TokenResolver
from todogist.auth.env import EnvTokenResolver
from todogist.auth.static import StaticTokenResolver

TODOIST_TOKEN_ENV = "TODOIST_API_TOKEN"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"


def create_token_resolver(token: str | None, *, env_variable: str) -> TokenResolver:
    """Use the configured *token* when present, else read *env_variable*."""
    if token:
        return StaticTokenResolver(token=token)
    return EnvTokenResolver(variable=env_variable)
