from .scheduler import WatcherScheduler
from .watcher import FeedWatcher, ProbeResult

__all__ = ["FeedWatcher", "ProbeResult", "WatcherScheduler"]
