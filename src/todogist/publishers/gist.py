"""GitHub gist publisher."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any

import httpx

from todogist.contracts.config import DEFAULT_GITHUB_API_URL
from todogist.contracts.exceptions import PublishError
from todogist.contracts.gist import GistFile
from todogist.http import RetryingTransport, log_request, log_response
from todogist.http.hooks import mask_token

_LOG = logging.getLogger(__name__)


def build_files_payload(old_filenames: Iterable[str], new_files: Iterable[GistFile]) -> dict[str, Any]:
    """Build the ``files`` payload that replaces a gist's whole file set.

    Every old filename maps to ``None`` (delete) unless a new file with the
    same name overwrites it.
    """
    files: dict[str, Any] = {filename: None for filename in old_filenames}
    for gist_file in new_files:
        files[gist_file.filename] = {"content": gist_file.content}
    return files


class GistPublisher:
    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_GITHUB_API_URL,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GistPublisher:
        _LOG.debug("authenticate with token %s", mask_token(self._token))
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": "todogist",
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

    async def update_gist(self, gist_id: str, *, description: str, files: Iterable[GistFile]) -> int:
        """Replace the files of gist *gist_id*.

        Returns:
            HTTP status code of the update request.

        Raises:
            PublishError: If the gist cannot be read or updated.
        """
        _LOG.debug("will get gist with id %s", gist_id)
        gist = await self._request("GET", f"/gists/{gist_id}")
        try:
            old_filenames = list((gist.json().get("files") or {}).keys())
        except (ValueError, AttributeError) as exc:
            raise PublishError(
                f"GET /gists/{gist_id} returned an unexpected body", status_code=gist.status_code
            ) from exc
        _LOG.debug("get done (%d existing file(s))", len(old_filenames))

        payload = {"description": description, "files": build_files_payload(old_filenames, files)}
        _LOG.debug("will update gist with id %s", gist_id)
        response = await self._request("PATCH", f"/gists/{gist_id}", json=payload)
        _LOG.debug("update done")
        return response.status_code

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is None:
            raise PublishError("Gist publisher is not initialized. Use 'async with'.")
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise PublishError(f"{method} {url} failed: {exc}") from exc
        if response.is_error:
            raise PublishError(
                f"{method} {url} returned HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response
