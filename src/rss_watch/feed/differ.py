from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rss_watch.observability import get_logger

from .models import PendingEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .models import Entry

logger = get_logger(__name__)


class DeliveryLookup(Protocol):
    def missing_guids(self, feed_id: int, guids: Sequence[str]) -> list[str]: ...


class EntryDiffer:
    def __init__(self, deliveries: DeliveryLookup) -> None:
        self._deliveries = deliveries

    def select_new(self, feed_id: int, entries: Iterable[Entry]) -> list[PendingEntry]:
        """Return undelivered entries in document order.

        Entries without a GUID are dropped before the store is consulted.
        A GUID repeated within the document is offered once.
        """
        candidates = [
            PendingEntry(guid=entry.guid, title=entry.title, link=entry.link)
            for entry in entries
            if entry.guid
        ]
        missing = set(self._deliveries.missing_guids(feed_id, [entry.guid for entry in candidates]))

        selected: list[PendingEntry] = []
        for entry in candidates:
            if entry.guid not in missing:
                continue
            missing.discard(entry.guid)
            selected.append(entry)

        logger.debug("entries_diffed", feed_id=feed_id, candidates=len(candidates), new_guids=[e.guid for e in selected])
        return selected
