"""Shared httpx plumbing for the Todoist and GitHub clients."""

from todogist.http.retrying_transport import RetryingTransport
from todogist.http.hooks import log_request, log_response

__all__ = ["RetryingTransport", "log_request", "log_response"]
