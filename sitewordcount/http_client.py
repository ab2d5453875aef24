"""Fetch several URLs concurrently and hand each body to a callback."""

from __future__ import annotations

import http.client
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable
from urllib.error import HTTPError, URLError
from urllib.request import Request, build_opener

USER_AGENT = "website-word-counter/1.0"
DEFAULT_TIMEOUT = 30.0
_MAX_PARALLEL = 64

RequestCallback = Callable[[str, bytes], None]


class HTTPClient:
    """Collect requests, then perform them all at once with :meth:`run`.

    Each callback receives the URL and the response body; the body is empty
    when the transfer failed or the status was outside 200-399.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._pending: list[tuple[str, RequestCallback]] = []
        self._opener = build_opener()

    def add_request(self, url: str, callback: RequestCallback) -> None:
        """Register *url* to be fetched on the next :meth:`run`."""
        self._pending.append((url, callback))

    def run(self) -> None:
        """Fetch every pending URL, calling the callbacks in completion order."""
        pending, self._pending = self._pending, []
        if not pending:
            return
        with ThreadPoolExecutor(max_workers=min(len(pending), _MAX_PARALLEL)) as executor:
            futures = {executor.submit(self._fetch, url): (url, callback) for url, callback in pending}
            for future in as_completed(futures):
                url, callback = futures[future]
                callback(url, future.result())

    def _fetch(self, url: str) -> bytes:
        try:
            request = Request(url, headers={"User-Agent": USER_AGENT})
            with self._opener.open(request, timeout=self.timeout) as response:
                status = getattr(response, "status", None)
                body = response.read()
        except HTTPError as error:
            with error:
                status = error.code
                try:
                    body = error.read()
                except (OSError, http.client.HTTPException):
                    return b""
        except (URLError, OSError, ValueError, http.client.HTTPException):
            return b""
        if status is None or not 200 <= status < 400:
            return b""
        return body