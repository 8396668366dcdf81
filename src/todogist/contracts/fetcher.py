"""Fetch capability consumed by the core pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any


class QueryFetcher(ABC):
    """Posts a query to the upstream API and returns its JSON payload.

    Retries, timeouts and authentication belong to implementations; the
    pipeline lets every exception raised here propagate unchanged.
    """

    async def __aenter__(self) -> QueryFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    @abstractmethod
    async def post_query(self, path: str, params: dict[str, Any]) -> Any:
        """POST *params* to *path* and return the decoded JSON payload."""
