from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rss_watch.storage.models import FeedRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rss_watch.feed.models import FeedKind


class InMemoryFeedStore:
    def __init__(self) -> None:
        self._feeds: dict[str, FeedRecord] = {}

    def register(self, url: str, kind: FeedKind) -> None:
        if url in self._feeds:
            return
        self._feeds[url] = FeedRecord(id=len(self._feeds) + 1, url=url, kind=kind, created_at=datetime.now(UTC))

    def get_by_url(self, url: str) -> FeedRecord | None:
        return self._feeds.get(url)


class InMemoryDeliveryStore:
    def __init__(self, delivered: dict[int, set[str]] | None = None) -> None:
        self.delivered: dict[int, set[str]] = {key: set(value) for key, value in (delivered or {}).items()}
        self.record_calls: list[tuple[int, str]] = []

    def missing_guids(self, feed_id: int, guids: Sequence[str]) -> list[str]:
        seen = self.delivered.get(feed_id, set())
        return [guid for guid in guids if guid not in seen]

    def record(self, feed_id: int, guid: str) -> None:
        self.record_calls.append((feed_id, guid))
        self.delivered.setdefault(feed_id, set()).add(guid)


class UnavailableDeliveryStore(InMemoryDeliveryStore):
    """Delivery store whose lookups fail as if the database were gone."""

    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self._exc = exc

    def missing_guids(self, feed_id: int, guids: Sequence[str]) -> list[str]:
        raise self._exc
