from .database import Database
from .models import DeliveryRecord, FeedRecord
from .repository import DeliveryRepository, FeedRepository

__all__ = [
    "Database",
    "DeliveryRecord",
    "DeliveryRepository",
    "FeedRecord",
    "FeedRepository",
]
