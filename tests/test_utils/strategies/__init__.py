from __future__ import annotations

from tests.test_utils.strategies.duration import duration_parts
from tests.test_utils.strategies.guid import guid_lists, guid_strategy

__all__ = ["duration_parts", "guid_lists", "guid_strategy"]
