from datetime import datetime, timezone

import pytest

from leaddesk.services import lead_service
from leaddesk.services.seed import demo_leads

NOW = datetime(2025, 12, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def leads():
    return demo_leads(NOW)


@pytest.fixture(autouse=True)
def store(monkeypatch):
    """Fresh demo collection per test, with the service clock pinned."""
    monkeypatch.setattr(lead_service, "_now", lambda: NOW)
    lead_service.reset(demo_leads(NOW))
    yield
    lead_service.reset()
