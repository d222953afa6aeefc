from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rss_watch.feed.models import FeedKind

from .models import DeliveryRecord, FeedRecord

if TYPE_CHECKING:
    import sqlite3
    from collections.abc import Sequence

    from .database import Database

# Stays well below SQLite's bound-parameter limit.
_GUID_CHUNK_SIZE = 500


class FeedRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    def register(self, url: str, kind: FeedKind) -> None:
        self._db.execute(
            "INSERT OR IGNORE INTO feeds (url, type, created_at) VALUES (?, ?, ?)",
            (url, int(kind), datetime.now(UTC).isoformat()),
        )

    def get_by_url(self, url: str) -> FeedRecord | None:
        row = self._db.execute(
            "SELECT id, url, type, created_at FROM feeds WHERE url = ?", (url,)
        ).fetchone()
        return self._row_to_feed(row) if row else None

    def _row_to_feed(self, row: sqlite3.Row) -> FeedRecord:
        return FeedRecord(
            id=row["id"],
            url=row["url"],
            kind=FeedKind(row["type"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class DeliveryRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    def missing_guids(self, feed_id: int, guids: Sequence[str]) -> list[str]:
        """Return the GUIDs not yet delivered for ``feed_id``, in input order.

        Duplicates in ``guids`` are kept; each one is checked against the
        same stored state.
        """
        delivered: set[str] = set()
        unique = list(dict.fromkeys(guids))
        for start in range(0, len(unique), _GUID_CHUNK_SIZE):
            chunk = unique[start : start + _GUID_CHUNK_SIZE]
            placeholders = ", ".join("?" for _ in chunk)
            rows = self._db.execute(
                f"SELECT guid FROM entries WHERE feed_id = ? AND guid IN ({placeholders})",  # noqa: S608
                (feed_id, *chunk),
            ).fetchall()
            delivered.update(row["guid"] for row in rows)
        return [guid for guid in guids if guid not in delivered]

    def record(self, feed_id: int, guid: str) -> None:
        self._db.execute(
            "INSERT OR IGNORE INTO entries (feed_id, guid, delivered_at) VALUES (?, ?, ?)",
            (feed_id, guid, datetime.now(UTC).isoformat()),
        )

    def list_by_feed(self, feed_id: int) -> list[DeliveryRecord]:
        rows = self._db.execute(
            """
            SELECT feed_id, guid, delivered_at
            FROM entries
            WHERE feed_id = ?
            ORDER BY id
            """,
            (feed_id,),
        ).fetchall()
        return [self._row_to_delivery(row) for row in rows]

    def _row_to_delivery(self, row: sqlite3.Row) -> DeliveryRecord:
        return DeliveryRecord(
            feed_id=row["feed_id"],
            guid=row["guid"],
            delivered_at=datetime.fromisoformat(row["delivered_at"]),
        )
