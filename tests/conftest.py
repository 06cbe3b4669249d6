import itertools

import pytest
import respx
from fastapi.testclient import TestClient
from httpx import Response

from waitlist_dashboard.config import settings

# Override settings for testing
settings.waitlist_api_url = "http://waitlist.test/api/waitlist"
settings.request_timeout_seconds = 5.0
settings.display_timezone = "UTC"
settings.fetch_on_startup = True

from waitlist_dashboard.main import app  # noqa: E402
from waitlist_dashboard.schemas import WaitlistEntry  # noqa: E402

WAITLIST_URL = settings.waitlist_api_url


@pytest.fixture(scope="function")
def entry_factory():
    """Factory for WaitlistEntry payload dicts with unique ids."""
    counter = itertools.count(1)

    def _factory(role: str = "vendor", **overrides):
        n = next(counter)
        data = {
            "id": n,
            "name": f"Person {n}",
            "email": f"person{n}@example.com",
            "occupation": "Caterer",
            "role": role,
            "created_at": "2025-01-05T15:04:00Z",
        }
        data.update(overrides)
        return data

    return _factory


@pytest.fixture(scope="function")
def sample_payload(entry_factory):
    """One event planner and two vendors, in server order."""
    return {
        "data": [
            entry_factory(role="event-planner", name="Ada Planner"),
            entry_factory(role="vendor", name="Bob Florist"),
            entry_factory(role="vendor", name="Cy Caterer"),
        ]
    }


@pytest.fixture(scope="function")
def sample_entries(sample_payload):
    return tuple(WaitlistEntry.model_validate(item) for item in sample_payload["data"])


@pytest.fixture(scope="function")
def upstream(sample_payload):
    """
    Mock the upstream waitlist API. The listing route is registered as
    ``upstream["waitlist"]`` and serves ``sample_payload`` by default.
    """
    with respx.mock(assert_all_called=False) as router:
        router.get(WAITLIST_URL, name="waitlist").mock(
            return_value=Response(200, json=sample_payload)
        )
        yield router


@pytest.fixture(scope="function")
def client(upstream):
    """TestClient running the app lifespan against the mocked upstream."""
    with TestClient(app) as test_client:
        yield test_client
    app.state.waitlist_controller = None
