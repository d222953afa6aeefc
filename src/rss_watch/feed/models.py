from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class FeedKind(IntEnum):
    """Feed format, persisted as the ``feeds.type`` discriminator."""

    UNDETERMINED = 0
    RSS = 1
    ATOM = 2


class Entry(Protocol):
    @property
    def guid(self) -> str | None: ...

    @property
    def title(self) -> str | None: ...

    @property
    def link(self) -> str | None: ...


@dataclass(frozen=True, slots=True)
class RssItem:
    guid: str | None
    title: str | None
    link: str | None


@dataclass(frozen=True, slots=True)
class AtomEntry:
    guid: str | None
    title: str | None
    link: str | None


@dataclass(frozen=True, slots=True)
class ParsedFeed:
    kind: FeedKind
    title: str | None
    entries: tuple[Entry, ...]


@dataclass(frozen=True, slots=True)
class PendingEntry:
    """An entry that has a GUID and has not been delivered yet."""

    guid: str
    title: str | None
    link: str | None

    def __post_init__(self) -> None:
        if not self.guid:
            msg = "guid cannot be empty"
            raise ValueError(msg)
