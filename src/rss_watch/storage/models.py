from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from rss_watch.feed.models import FeedKind


@dataclass(frozen=True, slots=True)
class FeedRecord:
    id: int
    url: str
    kind: FeedKind
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.url:
            msg = "url cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class DeliveryRecord:
    feed_id: int
    guid: str
    delivered_at: datetime

    def __post_init__(self) -> None:
        if not self.guid:
            msg = "guid cannot be empty"
            raise ValueError(msg)
