from tests.test_utils.factories.feed import (
    SAMPLE_FEED_URL,
    FetchResultFactory,
    PendingEntryFactory,
    RssItemFactory,
)
from tests.test_utils.factories.storage import DeliveryRecordFactory, FeedRecordFactory

__all__ = [
    "SAMPLE_FEED_URL",
    "DeliveryRecordFactory",
    "FeedRecordFactory",
    "FetchResultFactory",
    "PendingEntryFactory",
    "RssItemFactory",
]
