"""API test fixtures — FastAPI test client with a deterministic random source.

Invariants:
    - get_random_source overridden so /keypair output is reproducible
    - Overrides cleared after every test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app, no socket
"""

import pytest
from httpx import ASGITransport, AsyncClient
from solders.keypair import Keypair

from keyforge.infrastructure.entropy import get_random_source
from keyforge.main import app


@pytest.fixture
async def client(fixed_random_source):
    """FastAPI test client with the random source overridden."""
    app.dependency_overrides[get_random_source] = lambda: fixed_random_source

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def keypair():
    return Keypair.from_seed(b"\x11" * 32)
