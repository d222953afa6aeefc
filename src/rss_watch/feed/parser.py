from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any
from xml.sax import SAXParseException

import feedparser

from rss_watch.errors import FeedParseError
from rss_watch.observability import get_logger

from .models import AtomEntry, FeedKind, ParsedFeed, RssItem

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

_ALTERNATE = "alternate"


class AtomParseError(ValueError):
    """Raised when a document is not an Atom feed."""


class RssParseError(ValueError):
    """Raised when a document is not an RSS feed."""


def load_document(content: bytes | str) -> feedparser.FeedParserDict:
    if isinstance(content, str):
        content = content.encode("utf-8")
    # A stream keeps feedparser from treating the body as a URL or file name.
    return feedparser.parse(io.BytesIO(content))


def parse_feed(content: bytes | str) -> ParsedFeed:
    """Parse a feed body, trying Atom first and falling back to RSS.

    Only the RSS failure is attached as the cause of the raised
    ``FeedParseError``; the Atom failure is logged at debug level. Bodies
    that are not well-formed XML are rejected even when feedparser could
    recover part of them.
    """
    document = load_document(content)

    try:
        return parse_atom(document)
    except AtomParseError as exc:
        logger.debug("atom_parse_failed", error=str(exc))

    try:
        return parse_rss(document)
    except RssParseError as exc:
        msg = f"unable to parse feed: {exc}"
        raise FeedParseError(msg) from exc


def parse_atom(document: feedparser.FeedParserDict) -> ParsedFeed:
    version = _version(document)
    if not version.startswith("atom") or _is_malformed(document):
        raise AtomParseError(_rejection_reason(document, "atom"))

    entries = tuple(_atom_entry(entry) for entry in document.get("entries", []))
    return ParsedFeed(kind=FeedKind.ATOM, title=_get_str(document.get("feed", {}), "title"), entries=entries)


def parse_rss(document: feedparser.FeedParserDict) -> ParsedFeed:
    version = _version(document)
    if not version.startswith("rss") or _is_malformed(document):
        raise RssParseError(_rejection_reason(document, "rss"))

    entries = tuple(_rss_item(entry) for entry in document.get("entries", []))
    return ParsedFeed(kind=FeedKind.RSS, title=_get_str(document.get("feed", {}), "title"), entries=entries)


def _rss_item(entry: Mapping[str, Any]) -> RssItem:
    # feedparser stores <guid> under "id".
    guid = _get_str(entry, "id")
    link = _get_str(entry, "link")
    # A permalink <guid> is copied into "link" when the item has no <link>.
    if entry.get("guidislink") and link == guid:
        link = None
    return RssItem(guid=guid, title=_get_str(entry, "title"), link=link)


def _atom_entry(entry: Mapping[str, Any]) -> AtomEntry:
    return AtomEntry(
        guid=_get_str(entry, "id"),
        title=_get_str(entry, "title"),
        link=_alternate_link(entry),
    )


def _alternate_link(entry: Mapping[str, Any]) -> str | None:
    for link in entry.get("links", []):
        if link.get("rel", _ALTERNATE) != _ALTERNATE:
            continue
        href = _get_str(link, "href")
        if href is not None:
            return href
    return None


def _version(document: Mapping[str, Any]) -> str:
    version = document.get("version")
    return version if isinstance(version, str) else ""


def _rejection_reason(document: Mapping[str, Any], expected: str) -> str:
    version = _version(document)
    if version and not _is_malformed(document):
        return f"expected {expected} document, found {version}"
    if document.get("bozo"):
        return f"malformed document: {document.get('bozo_exception')}"
    return f"expected {expected} document, found unrecognised content"


def _is_malformed(document: Mapping[str, Any]) -> bool:
    return bool(document.get("bozo")) and isinstance(document.get("bozo_exception"), SAXParseException)


def _get_str(obj: Mapping[str, Any], name: str) -> str | None:
    value = obj.get(name)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
