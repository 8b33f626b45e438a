"""API test fixtures — FastAPI test client with injectable catalog and shuffler.

Invariants:
    - Every test gets a fresh AsyncClient over ASGITransport (no network)
    - dependency_overrides cleared after each test

Design Decisions:
    - `ordered_client` pins IdentityShuffler so playlist order is the
      catalog's declaration order; `client` keeps the real shuffler
"""

import pytest
from httpx import ASGITransport, AsyncClient

from moodtunes.api.dependencies import get_shuffler
from moodtunes.core.shuffle import IdentityShuffler
from moodtunes.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def ordered_client():
    """Client whose playlists keep declaration order."""
    app.dependency_overrides[get_shuffler] = IdentityShuffler
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
