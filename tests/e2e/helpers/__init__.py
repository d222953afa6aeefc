from tests.e2e.helpers.cli import run_cli, start_watcher
from tests.e2e.helpers.database import EntryRow, list_entries, list_feeds

__all__ = ["EntryRow", "list_entries", "list_feeds", "run_cli", "start_watcher"]
