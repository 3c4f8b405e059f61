"""HTTP client with timeouts and typed fetch/parse failures."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Any

import requests

from shelter_feed.common.constants import USER_AGENT
from shelter_feed.common.errors import FetchError, ParseError


def _reject_constant(token: str) -> float:
    raise ValueError(f"Non-standard JSON constant: {token}")


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 120.0


class HttpClient:
    """Single-shot JSON GETs over a ``requests.Session``.

    Failed requests are never retried; the caller decides what to do with a
    ``FetchError``.
    """

    def __init__(self, *, timeout: TimeoutConfig | None = None) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        out = {"User-Agent": USER_AGENT, "Accept": "application/geo+json, application/json"}
        if headers:
            out.update(headers)
        return out

    def _raise_for_status(self, response: requests.Response) -> None:
        # Only 2xx counts as success; redirects are followed by the session.
        if not 200 <= response.status_code < 300:
            reason = response.reason or f"HTTP {response.status_code}"
            raise FetchError(f"Failed to fetch FEMA shelters: {reason}")

    def get_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> Any:
        req_timeout = timeout or self.timeout
        try:
            response = self.session.request(
                method="GET",
                url=url,
                params=params,
                headers=self._headers(headers),
                timeout=(req_timeout.connect, req_timeout.read),
            )
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch FEMA shelters: {exc}") from exc

        self._raise_for_status(response)

        try:
            return response.json(parse_constant=_reject_constant)
        except ValueError as exc:
            raise ParseError(f"Invalid JSON payload from {url}") from exc
