"""httpx event hooks that log traffic without leaking credentials."""

from __future__ import annotations

import logging

import httpx

_LOG = logging.getLogger("todogist.http")


def mask_token(token: str) -> str:
    return token[:3] + "..."


async def log_request(request: httpx.Request) -> None:
    _LOG.debug("-> %s %s", request.method, request.url)


async def log_response(response: httpx.Response) -> None:
    request = response.request
    _LOG.debug("<- %s %s %d", request.method, request.url, response.status_code)
