from tests.test_utils.fakes.core import BlockingWatcher, CountingWatcher, FailingWatcher
from tests.test_utils.fakes.delivery import RecordingRunner, RunCall
from tests.test_utils.fakes.feed import SequenceFetcher
from tests.test_utils.fakes.storage import InMemoryDeliveryStore, InMemoryFeedStore, UnavailableDeliveryStore

__all__ = [
    "BlockingWatcher",
    "CountingWatcher",
    "FailingWatcher",
    "InMemoryDeliveryStore",
    "InMemoryFeedStore",
    "RecordingRunner",
    "RunCall",
    "SequenceFetcher",
    "UnavailableDeliveryStore",
]
