"""Todoist Sync API integration."""

from todogist.providers.todoist.client import TodoistClient
from todogist.providers.todoist.provider import TodoistProvider

__all__ = ["TodoistClient", "TodoistProvider"]
