"""Shared test fixtures for the jsonapi-codec test suite."""

import pytest

from jsonapi_codec.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Run every test with default settings and an empty settings cache."""
    for name in ("ERROR_STATUS", "DEFAULT_PAGE_SIZE", "MEDIA_TYPE", "VERSION"):
        monkeypatch.delenv(f"JSONAPI_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def post_json():
    """Return a fetched post with an author relationship and included author."""
    return {
        "data": {
            "type": "posts",
            "id": "1",
            "attributes": {"title": "Hello", "body": "First post"},
            "relationships": {
                "author": {"data": {"type": "authors", "id": "2"}},
                "comments": {"links": {"related": "/posts/1/comments"}},
            },
            "links": {"self": "/posts/1"},
        },
        "included": [
            {
                "type": "authors",
                "id": "2",
                "attributes": {"name": "Alice"},
            }
        ],
        "links": {"self": {"href": "/posts/1", "meta": {"version": 2}}},
        "meta": {"generated": True},
    }
