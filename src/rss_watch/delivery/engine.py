"""Runs the configured scripts for new feed entries.

An entry counts as delivered as soon as one script exits with status 0. A
later script failing for the same entry does not undo that. When every
script fails the entry stays undelivered and the whole script list runs
again on the next poll.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from rss_watch.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rss_watch.delivery.runner import ScriptRunner
    from rss_watch.feed.models import PendingEntry
    from rss_watch.storage.models import FeedRecord

logger = get_logger(__name__)


class DeliveryRecorder(Protocol):
    def record(self, feed_id: int, guid: str) -> None: ...


@dataclass(slots=True)
class DeliveryReport:
    delivered: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    executions: int = 0


def entry_environment(feed_url: str, entry: PendingEntry) -> dict[str, str]:
    return {
        "FEED_URL": feed_url,
        "FEED_GUID": entry.guid,
        "FEED_LINK": entry.link or "",
        "FEED_TITLE": entry.title or "",
    }


class DeliveryEngine:
    def __init__(
        self,
        *,
        deliveries: DeliveryRecorder,
        runner: ScriptRunner,
        scripts: Sequence[Path],
        import_only: bool = False,
    ) -> None:
        self._deliveries = deliveries
        self._runner = runner
        self._scripts = tuple(scripts)
        self._import_only = import_only

    async def deliver(self, feed: FeedRecord, entries: Sequence[PendingEntry]) -> DeliveryReport:
        report = DeliveryReport()
        for entry in entries:
            if self._import_only:
                self._deliveries.record(feed.id, entry.guid)
                report.delivered.append(entry.guid)
                continue

            if await self._run_scripts(feed, entry, report):
                report.delivered.append(entry.guid)
            else:
                report.failed.append(entry.guid)
                logger.warning("entry_delivery_failed", feed_url=feed.url, guid=entry.guid, scripts=len(self._scripts))

        if self._import_only:
            logger.info("entries_imported", feed_url=feed.url, count=len(report.delivered))
        return report

    async def _run_scripts(self, feed: FeedRecord, entry: PendingEntry, report: DeliveryReport) -> bool:
        env = entry_environment(feed.url, entry)
        delivered = False
        for program in self._scripts:
            result = await self._runner.run(program, env)
            report.executions += 1
            if result.ok:
                logger.debug("command_succeeded", program=str(program), guid=entry.guid)
                self._deliveries.record(feed.id, entry.guid)
                delivered = True
            else:
                logger.error(
                    "command_failed",
                    program=str(program),
                    guid=entry.guid,
                    returncode=result.returncode,
                    reason=result.describe(),
                )
        return delivered
