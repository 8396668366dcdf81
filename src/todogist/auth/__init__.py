"""Auth module public exports."""

from todogist.auth.base import TokenResolver
from todogist.auth.env import EnvTokenResolver
from todogist.auth.factory import GITHUB_TOKEN_ENV, TODOIST_TOKEN_ENV, create_token_resolver
from todogist.auth.static import StaticTokenResolver

__all__ = [
    "GITHUB_TOKEN_ENV",
    "TODOIST_TOKEN_ENV",
    "EnvTokenResolver",
    "StaticTokenResolver",
    "TokenResolver",
    "create_token_resolver",
]
