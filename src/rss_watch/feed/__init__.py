from rss_watch.feed.differ import EntryDiffer
from rss_watch.feed.http_fetcher import Fetcher, FetchResult, HttpFetcher
from rss_watch.feed.models import AtomEntry, Entry, FeedKind, ParsedFeed, PendingEntry, RssItem
from rss_watch.feed.parser import AtomParseError, RssParseError, parse_atom, parse_feed, parse_rss

__all__ = [
    "AtomEntry",
    "AtomParseError",
    "Entry",
    "EntryDiffer",
    "FeedKind",
    "FetchResult",
    "Fetcher",
    "HttpFetcher",
    "ParsedFeed",
    "PendingEntry",
    "RssItem",
    "RssParseError",
    "parse_atom",
    "parse_feed",
    "parse_rss",
]
