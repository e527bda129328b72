"""Service test fixtures — in-memory counter store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryCounterStore and UsageCounter
    - get_usage_counter dependency overridden to use the test counter

Design Decisions:
    - In-memory store: no filesystem or database needed for route tests
    - Lifespan not run by ASGITransport: dependency override is the only wiring
"""

import pytest
from httpx import ASGITransport, AsyncClient

from weightrange.core.domain_types import CounterPolicy
from weightrange.infrastructure.in_memory_counter_store import InMemoryCounterStore
from weightrange.main import app
from weightrange.services.usage_counter import UsageCounter, get_usage_counter


@pytest.fixture
def memory_store():
    return InMemoryCounterStore()


@pytest.fixture
def counter(memory_store):
    return UsageCounter(memory_store, CounterPolicy.SERIALIZED)


@pytest.fixture
async def client(counter):
    """FastAPI test client with the usage counter dependency overridden."""
    app.dependency_overrides[get_usage_counter] = lambda: counter

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
