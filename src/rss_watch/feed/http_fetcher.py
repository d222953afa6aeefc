from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

import httpx

from rss_watch.errors import FetchError


class HTTPHeader(StrEnum):
    ACCEPT = "Accept"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"


FEED_ACCEPT = "application/atom+xml, application/rss+xml, application/xml;q=0.9, text/xml;q=0.9, */*;q=0.8"


@dataclass(frozen=True, slots=True)
class FetchResult:
    url: str
    status_code: int
    content: bytes
    content_type: str | None


class Fetcher(Protocol):
    async def fetch(self, url: str) -> FetchResult: ...


class HttpFetcher:
    """Downloads a feed body. Failures are reported once, never retried.

    The request timeout comes from the client; the application builds it
    with a 30 second limit so an unresponsive server turns into a
    ``FetchError`` and a skipped cycle instead of a stalled watcher. Child
    scripts, by contrast, run without any timeout.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> FetchResult:
        try:
            response = await self._client.get(url, headers={HTTPHeader.ACCEPT: FEED_ACCEPT})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"unexpected HTTP status {exc.response.status_code} from {url}"
            raise FetchError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"request to {url} failed: {exc!r}"
            raise FetchError(msg) from exc

        return FetchResult(
            url=str(response.url),
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get(HTTPHeader.CONTENT_TYPE),
        )
