"""Test configuration and fixtures."""

import time
from collections.abc import AsyncGenerator, Generator
from datetime import UTC, datetime

import pytest
import pytest_asyncio
from app.api.common_app import app_common
from app.api.v0.main import app_v0
from app.main import app
from app.services.status import ProcessStart, get_process_start
from httpx import ASGITransport, AsyncClient


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.value = start

    def advance(self, seconds: float) -> None:
        self.value += seconds

    def __call__(self) -> float:
        return self.value


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def process_start(fake_clock: FakeClock) -> ProcessStart:
    return ProcessStart(
        monotonic=fake_clock(),
        started_at=datetime(2024, 1, 15, 10, 30, tzinfo=UTC),
    )


@pytest.fixture
def override_process_start() -> Generator[ProcessStart]:
    """Inject a process start taken five seconds ago into every app serving the status route."""
    process_start = ProcessStart(
        monotonic=time.monotonic() - 5,
        started_at=datetime.now(UTC),
    )
    apps = [app_common, app_v0]
    for target in apps:
        target.dependency_overrides[get_process_start] = lambda: process_start
    yield process_start
    for target in apps:
        target.dependency_overrides.pop(get_process_start, None)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """HTTP client against the root application (all sub-applications mounted)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def client_v0() -> AsyncGenerator[AsyncClient]:
    """HTTP client against the v0 sub-application only."""
    async with AsyncClient(
        transport=ASGITransport(app=app_v0), base_url="http://test"
    ) as client:
        yield client
