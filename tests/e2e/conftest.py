from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

    from pytest_httpserver import HTTPServer


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "database.db"


@pytest.fixture
def rss_feed_url(httpserver: HTTPServer, rss_valid: bytes) -> str:
    httpserver.expect_request("/feed.xml").respond_with_data(rss_valid, content_type="application/rss+xml")
    return httpserver.url_for("/feed.xml")


@pytest.fixture
def atom_feed_url(httpserver: HTTPServer, atom_valid: bytes) -> str:
    httpserver.expect_request("/atom.xml").respond_with_data(atom_valid, content_type="application/atom+xml")
    return httpserver.url_for("/atom.xml")
