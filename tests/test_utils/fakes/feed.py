from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from tests.test_utils.factories import FetchResultFactory

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rss_watch.feed.http_fetcher import FetchResult


class SequenceFetcher:
    """Returns the queued bodies in order; exceptions in the queue are raised."""

    def __init__(self, responses: Iterable[bytes | Exception]) -> None:
        self._responses = deque(responses)
        self.fetched_urls: list[str] = []

    def push(self, response: bytes | Exception) -> None:
        self._responses.append(response)

    async def fetch(self, url: str) -> FetchResult:
        self.fetched_urls.append(url)
        if not self._responses:
            msg = "SequenceFetcher responses exhausted"
            raise RuntimeError(msg)
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return FetchResultFactory.build(url=url, content=response)
