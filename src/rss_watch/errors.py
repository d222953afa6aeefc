"""Errors raised by the feed watcher core."""

from __future__ import annotations


class WatcherError(Exception):
    """Base class for failures of the watcher itself."""


class FetchError(WatcherError):
    """Raised when the feed could not be downloaded."""


class FeedParseError(WatcherError):
    """Raised when a document is neither a valid Atom nor RSS feed."""


class StorageError(WatcherError):
    """Raised when the delivery database is unavailable or corrupt."""


class FeedNotRegisteredError(WatcherError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"feed with the URL `{url}' could not be found in the database")
