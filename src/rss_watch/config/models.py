from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from urllib.parse import urlparse

import typer
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .durations import parse_duration

APP_NAME = "rss-watch"
DEFAULT_REFRESH_INTERVAL = "60s"


def _is_valid_feed_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def default_database_path() -> Path:
    return Path(typer.get_app_dir(APP_NAME)) / "database.db"


class WatcherConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    feed_url: str
    refresh_interval: timedelta
    database_path: Path
    import_only: bool = False
    scripts: tuple[Path, ...] = ()

    @field_validator("feed_url")
    @classmethod
    def _validate_feed_url(cls, value: str) -> str:
        if not _is_valid_feed_url(value):
            msg = "must be an absolute http(s) URL"
            raise ValueError(msg)
        return value

    @field_validator("refresh_interval", mode="before")
    @classmethod
    def _parse_refresh_interval(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_duration(value)
        return value

    @field_validator("refresh_interval")
    @classmethod
    def _validate_refresh_interval(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            msg = "must be positive"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _require_scripts(self) -> WatcherConfig:
        if not self.import_only and not self.scripts:
            msg = "at least one script is required unless import_only is set"
            raise ValueError(msg)
        return self

    @property
    def interval_seconds(self) -> float:
        return self.refresh_interval.total_seconds()
