import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from unittest import mock


def passthrough_decorator(*args, **kwargs):
    """Passthrough decorator that doesn't do rate limiting"""

    def decorator(func):
        return func

    return decorator


mock.patch("slowapi.Limiter.limit", passthrough_decorator).start()
mock.patch("slowapi.Limiter.shared_limit", passthrough_decorator).start()

# ruff: noqa: E402
from maintenance_app.main import app
from maintenance_app.core.maintenance_state import maintenance_run
from maintenance_app.schemas import Phase

START = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """moment `seconds` after START"""
    return START + timedelta(seconds=seconds)


@pytest.fixture
def scenario_phases():
    """three phases: 10% after 3s, 25% after 11s, 45% after 23s"""
    return [
        Phase(name="Initializing", progress=10, duration=3),
        Phase(name="Backing up", progress=25, duration=8),
        Phase(name="Updating", progress=45, duration=12),
    ]


@pytest.fixture
def frozen_clock():
    """patch the service clock; set `.return_value` to move time"""
    with mock.patch("maintenance_app.core.maintenance_state.utcnow", return_value=START) as clock:
        maintenance_run.reset()
        yield clock


@pytest.fixture(scope="function")
def client():
    """create a test client with background jobs disabled"""

    async def passthrough_middleware(self, request, call_next):
        """passthrough middleware that doesnt do rate limiting"""
        response = await call_next(request)
        return response

    with (
        mock.patch("maintenance_app.core.scheduler.init_scheduler"),
        mock.patch("maintenance_app.core.scheduler.start_scheduler"),
        mock.patch("maintenance_app.core.scheduler.shutdown_scheduler"),
        mock.patch("slowapi.middleware.SlowAPIMiddleware.dispatch", passthrough_middleware),
    ):
        with TestClient(app, base_url="http://localhost:3001") as test_client:
            yield test_client

    maintenance_run.reset()
