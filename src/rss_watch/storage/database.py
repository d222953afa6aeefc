from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING

from rss_watch.errors import StorageError
from rss_watch.observability import get_logger

from .sql import SCHEMA_SQL

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = get_logger(__name__)


class Database:
    def __init__(self, path: Path) -> None:
        self._path = path
        self._connection: sqlite3.Connection | None = None

    @property
    def path(self) -> Path:
        return self._path

    def connect(self) -> sqlite3.Connection:
        if self._connection is None:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._connection = sqlite3.connect(self._path)
            except (OSError, sqlite3.Error) as exc:
                msg = f"unable to open database at {self._path}: {exc}"
                raise StorageError(msg) from exc
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def initialize(self) -> None:
        logger.debug("database_opening", path=str(self._path))
        connection = self.connect()
        try:
            connection.executescript(SCHEMA_SQL)
            connection.commit()
        except sqlite3.Error as exc:
            msg = f"unable to initialize database schema: {exc}"
            raise StorageError(msg) from exc

    def execute(
        self,
        query: str,
        params: Sequence[object] | None = None,
    ) -> sqlite3.Cursor:
        connection = self.connect()
        try:
            cursor = connection.execute(query, params or ())
            connection.commit()
        except sqlite3.Error as exc:
            msg = f"database error: {exc}"
            raise StorageError(msg) from exc
        return cursor

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
