"""Upstream service integrations."""

from todogist.providers.todoist import TodoistClient, TodoistProvider

__all__ = ["TodoistClient", "TodoistProvider"]
