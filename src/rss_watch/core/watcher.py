from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rss_watch.errors import FeedNotRegisteredError, FeedParseError, FetchError
from rss_watch.feed.parser import parse_feed
from rss_watch.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from rss_watch.delivery.engine import DeliveryReport
    from rss_watch.feed.http_fetcher import Fetcher
    from rss_watch.feed.models import Entry, FeedKind, ParsedFeed, PendingEntry
    from rss_watch.storage.models import FeedRecord

logger = get_logger(__name__)


class FeedStore(Protocol):
    def register(self, url: str, kind: FeedKind) -> None: ...
    def get_by_url(self, url: str) -> FeedRecord | None: ...


class Differ(Protocol):
    def select_new(self, feed_id: int, entries: Iterable[Entry]) -> list[PendingEntry]: ...


class Engine(Protocol):
    async def deliver(self, feed: FeedRecord, entries: Sequence[PendingEntry]) -> DeliveryReport: ...


@dataclass(frozen=True, slots=True)
class ProbeResult:
    record: FeedRecord
    feed: ParsedFeed


class FeedWatcher:
    def __init__(
        self,
        *,
        feed_url: str,
        fetcher: Fetcher,
        feeds: FeedStore,
        differ: Differ,
        engine: Engine,
    ) -> None:
        self._feed_url = feed_url
        self._fetcher = fetcher
        self._feeds = feeds
        self._differ = differ
        self._engine = engine

    @property
    def feed_url(self) -> str:
        return self._feed_url

    async def probe(self) -> ProbeResult:
        """Fetch the feed once, detect its kind and register it.

        Every failure propagates: the watcher must not poll a feed it could
        not type at least once.
        """
        logger.info("feed_probe_started", feed_url=self._feed_url)
        feed = await self._fetch_and_parse()

        self._feeds.register(self._feed_url, feed.kind)
        record = self._require_record()
        if record.kind != feed.kind:
            logger.warning(
                "feed_kind_changed",
                feed_url=self._feed_url,
                stored_kind=record.kind.name,
                detected_kind=feed.kind.name,
            )

        logger.info("feed_probe_completed", feed_url=self._feed_url, kind=feed.kind.name, entries=len(feed.entries))
        return ProbeResult(record=record, feed=feed)

    async def check(self) -> DeliveryReport | None:
        """Run one poll cycle. Returns None when the feed could not be read."""
        try:
            feed = await self._fetch_and_parse()
        except FetchError as exc:
            logger.warning("feed_fetch_failed", feed_url=self._feed_url, error=str(exc))
            return None
        except FeedParseError as exc:
            logger.warning("feed_parse_failed", feed_url=self._feed_url, error=str(exc))
            return None

        return await self.process(feed)

    async def process(self, feed: ParsedFeed) -> DeliveryReport:
        record = self._require_record()
        entries = self._differ.select_new(record.id, feed.entries)
        logger.info(
            "watch_cycle_started",
            feed_url=self._feed_url,
            entries=len(feed.entries),
            new_guids=[entry.guid for entry in entries],
        )

        report = await self._engine.deliver(record, entries)

        logger.info(
            "watch_cycle_completed",
            feed_url=self._feed_url,
            delivered=len(report.delivered),
            failed=len(report.failed),
        )
        return report

    async def _fetch_and_parse(self) -> ParsedFeed:
        result = await self._fetcher.fetch(self._feed_url)
        return parse_feed(result.content)

    def _require_record(self) -> FeedRecord:
        record = self._feeds.get_by_url(self._feed_url)
        if record is None:
            raise FeedNotRegisteredError(self._feed_url)
        return record
