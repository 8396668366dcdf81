"""httpx-backed fetch capability for the Todoist Sync API."""

from __future__ import annotations

import logging
import uuid
from types import TracebackType
from typing import Any

import httpx

from todogist.contracts.config import DEFAULT_TODOIST_BASE_URL
from todogist.contracts.exceptions import AuthenticationError, ProviderError
from todogist.contracts.fetcher import QueryFetcher
from todogist.http import RetryingTransport, log_request, log_response
from todogist.http.hooks import mask_token

_LOG = logging.getLogger(__name__)


class TodoistClient(QueryFetcher):
    """POSTs JSON queries to the Sync API and returns the decoded payload.

    Use as an async context manager; the underlying ``httpx.AsyncClient`` is
    opened on enter and closed on exit.
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_TODOIST_BASE_URL,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TodoistClient:
        _LOG.debug("Opening Todoist client for %s with token %s", self._base_url, mask_token(self._token))
        self._client = httpx.AsyncClient(
            base_url=self._base_url + "/",
            headers={
                "Authorization": f"Bearer {self._token}",
                "X-Request-Id": str(uuid.uuid4()),
            },
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            event_hooks={"request": [log_request], "response": [log_response]},
            timeout=httpx.Timeout(30.0),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def post_query(self, path: str, params: dict[str, Any]) -> Any:
        if self._client is None:
            raise ProviderError("Todoist client is not initialized. Use 'async with'.")

        try:
            response = await self._client.post(path, json=params)
        except httpx.TransportError as exc:
            raise ProviderError(f"Todoist request to '{path}' failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(f"Todoist rejected the API token (HTTP {response.status_code})")
        if response.is_error:
            raise ProviderError(f"Todoist request to '{path}' returned HTTP {response.status_code}: {response.text}")

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"Todoist response for '{path}' is not valid JSON") from exc
