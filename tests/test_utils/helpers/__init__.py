"""Test helpers."""

from tests.test_utils.helpers.feeds import ItemSpec, atom_document, rss_document
from tests.test_utils.helpers.fixture import fixture_path, read_fixture_bytes
from tests.test_utils.helpers.scripts import env_recorder_script, minimal_env, read_env_records, write_script

__all__ = [
    "ItemSpec",
    "atom_document",
    "env_recorder_script",
    "fixture_path",
    "minimal_env",
    "read_env_records",
    "read_fixture_bytes",
    "rss_document",
    "write_script",
]
