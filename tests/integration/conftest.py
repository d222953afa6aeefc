from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rss_watch.storage import Database, DeliveryRepository, FeedRepository

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "database.db"


@pytest.fixture
def database(db_path: Path) -> Generator[Database, None, None]:
    db = Database(db_path)
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def feed_repo(database: Database) -> FeedRepository:
    return FeedRepository(database)


@pytest.fixture
def delivery_repo(database: Database) -> DeliveryRepository:
    return DeliveryRepository(database)
