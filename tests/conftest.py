"""
Test fixtures for the Facility Access API test suite.

This module provides shared fixtures used across all test files:

  - store: A fresh, empty FacilityStore for each test
  - client: Async HTTP test client wired to that store
  - member / employee: Records registered through the real API

Key design decisions:
  - Each test gets its own FacilityStore, so ID counters start at 1 and no
    state leaks between tests.
  - We override FastAPI's get_store dependency to inject the test store,
    so the application code works exactly as it does in production.
  - The member and employee fixtures go through the HTTP endpoints rather
    than the services, so they exercise the real request validation.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from facility_api.main import app
from facility_api.store import FacilityStore, get_store


@pytest.fixture
def store():
    """Provide an empty facility store."""
    return FacilityStore()


@pytest_asyncio.fixture
async def client(store):
    """
    Async HTTP test client with the test store injected.

    This overrides the get_store dependency so all requests hit the
    per-test store instead of the process-wide one.
    """
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def member(client):
    """A member registered via POST /members (John Doe, ID 1)."""
    response = await client.post(
        "/members",
        json={
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@example.com",
            "phone": "555-1234",
        },
    )
    assert response.status_code == 201, f"Member creation failed: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def employee(client):
    """An employee registered via POST /employees (Jane Smith, ID 1)."""
    response = await client.post(
        "/employees",
        json={
            "first_name": "Jane",
            "last_name": "Smith",
            "email": "jane.smith@example.com",
            "phone": "555-0123",
            "department": "Operations",
            "position": "Front Desk Lead",
            "salary": "42000.00",
        },
    )
    assert response.status_code == 201, f"Employee creation failed: {response.text}"
    return response.json()
