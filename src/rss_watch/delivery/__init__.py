from rss_watch.delivery.engine import DeliveryEngine, DeliveryReport, entry_environment
from rss_watch.delivery.runner import ExecutionResult, ScriptRunner, SubprocessRunner

__all__ = [
    "DeliveryEngine",
    "DeliveryReport",
    "ExecutionResult",
    "ScriptRunner",
    "SubprocessRunner",
    "entry_environment",
]
