from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .errors import ConfigError, ScriptNotExecutableError
from .models import DEFAULT_REFRESH_INTERVAL, WatcherConfig, default_database_path

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def ensure_executable(scripts: Iterable[Path]) -> None:
    for script in scripts:
        if not is_executable(script):
            raise ScriptNotExecutableError(str(script))


def load_config(
    *,
    feed_url: str,
    scripts: Iterable[Path] = (),
    refresh_interval: str | timedelta = DEFAULT_REFRESH_INTERVAL,
    database_path: Path | None = None,
    import_only: bool = False,
) -> WatcherConfig:
    try:
        config = WatcherConfig(
            feed_url=feed_url,
            refresh_interval=refresh_interval,
            database_path=database_path or default_database_path(),
            import_only=import_only,
            scripts=tuple(Path(script).absolute() for script in scripts),
        )
    except ValidationError as exc:
        msg = f"invalid configuration: {exc}"
        raise ConfigError(msg) from exc

    ensure_executable(config.scripts)
    return config
