from .durations import parse_duration
from .errors import ConfigError, ScriptNotExecutableError
from .loader import ensure_executable, is_executable, load_config
from .models import APP_NAME, DEFAULT_REFRESH_INTERVAL, WatcherConfig, default_database_path

__all__ = [
    "APP_NAME",
    "DEFAULT_REFRESH_INTERVAL",
    "ConfigError",
    "ScriptNotExecutableError",
    "WatcherConfig",
    "default_database_path",
    "ensure_executable",
    "is_executable",
    "load_config",
    "parse_duration",
]
