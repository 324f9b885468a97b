"""
GMUnderground - Test Configuration and Fixtures
"""
import os
import uuid
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment
os.environ['STORAGE_BACKEND'] = 'memory'
os.environ['AUTH_CHECK_DELAY_SECONDS'] = '0'
os.environ['ACCOUNT_AUTH_CHECK_DELAY_SECONDS'] = '0'
os.environ['PROFILE_SAVE_DELAY_SECONDS'] = '0'

from underground_service.main import app
from underground_service.infrastructure.state import viewer_state
from underground_service.infrastructure.storage import InMemoryKeyValueStore, key_value_store

fake = Faker()


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_state():
    """Start every test with empty viewer state and storage"""
    viewer_state.clear()
    if isinstance(key_value_store, InMemoryKeyValueStore):
        key_value_store.clear()
    yield
    viewer_state.clear()
    app.dependency_overrides.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def viewer_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def viewer_headers(viewer_id: str) -> dict:
    """Headers identifying a fresh viewer"""
    return {'X-Viewer-Id': viewer_id}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client against the app"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac


@pytest.fixture
def sign_up_data() -> dict:
    """Generate sign-up payload"""
    return {
        'name': fake.name(),
        'email': fake.email(),
        'password': fake.password(),
    }
