"""HTTP client for the SBDB Query API."""

from __future__ import annotations

import re
import urllib.error
import urllib.request
from http.client import HTTPResponse
from typing import Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .query import Filter

__all__ = ["ENDPOINT", "ClientError", "HTTPStatusError", "Client"]

ENDPOINT = "https://ssd-api.jpl.nasa.gov/sbdb_query.api"

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


class ClientError(Exception):
    """Raised when a request cannot be built or sent."""


class HTTPStatusError(ClientError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"unexpected status {status}: {body}")
        self.status = status
        self.body = body


def _parse_endpoint(endpoint: str) -> SplitResult:
    if any(ord(ch) < 0x20 or ch == "\x7f" for ch in endpoint):
        raise ValueError("invalid control character in URL")
    if endpoint.startswith(":"):
        raise ValueError("missing protocol scheme")
    parts = urlsplit(endpoint)
    if parts.scheme and not _SCHEME.fullmatch(parts.scheme):
        raise ValueError(f"invalid scheme {parts.scheme!r}")
    if " " in parts.netloc:
        raise ValueError("invalid character ' ' in host name")
    return parts


class Client:
    """Issues queries to the SBDB Query API.

    endpoint overrides the default API address; timeout is in seconds
    (None waits indefinitely); opener replaces the default urllib opener.
    """

    def __init__(
        self,
        endpoint: str = "",
        timeout: Optional[float] = None,
        opener: Optional[urllib.request.OpenerDirector] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.opener = opener

    def get_url(self, filter: Filter) -> str:
        """The request URL for the given filter."""
        try:
            query = filter.encode()
        except ValueError as exc:
            raise ClientError(f"error parsing filter: {exc}") from exc
        try:
            parts = _parse_endpoint(self.endpoint or ENDPOINT)
        except ValueError as exc:
            raise ClientError(f"error parsing endpoint: {exc}") from exc
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))

    def get(self, filter: Filter) -> HTTPResponse:
        """Send a GET request for the filter and return the open response.

        The caller is responsible for closing the response.
        """
        url = self.get_url(filter)
        request = urllib.request.Request(url, method="GET")
        opener = self.opener or urllib.request.build_opener()
        try:
            response = opener.open(request, timeout=self.timeout)
        except urllib.error.HTTPError as exc:
            with exc:
                body = exc.read().decode("utf-8", errors="replace")
            raise HTTPStatusError(exc.code, body) from None
        except OSError as exc:
            raise ClientError(f"request failed: {exc}") from exc
        if not 200 <= response.status < 300:
            with response:
                body = response.read().decode("utf-8", errors="replace")
            raise HTTPStatusError(response.status, body)
        return response