"""
Pytest configuration and fixtures for AccessGrid SDK tests.
"""
from __future__ import annotations

import pytest

from accessgrid import AccessGrid, AsyncAccessGrid, ClientConfig

BASE_URL = "https://api.accessgrid.test"


# Mock response data
MOCK_RESPONSES = {
    "card": {
        "id": "0xc4rd1d",
        "card_template_id": "0xd3adb00b5",
        "full_name": "Employee name",
        "state": "active",
        "install_url": "https://accessgrid.com/install/0xc4rd1d",
    },
    "unified_access_pass": {
        "id": "0xp455",
        "install_url": "https://accessgrid.com/install/0xp455",
        "state": "active",
        "status": "issued",
        "details": [
            {
                "id": "0xc4rd1d",
                "card_template_id": "0xd3adb00b5",
                "full_name": "Employee name",
                "state": "active",
            },
            {
                "id": "0xc4rd2d",
                "card_template_id": "0xd3adb00b6",
                "full_name": "Employee name",
                "state": "active",
            },
        ],
    },
    "template": {
        "id": "0xd3adb00b5",
        "name": "Employee NFC key",
        "platform": "apple",
        "use_case": "employee_badge",
        "protocol": "desfire",
        "watch_count": 2,
        "iphone_count": 3,
    },
    "event": {
        "id": "evt_123",
        "type": "install",
        "user_id": "usr_456",
        "card_id": "0xc4rd1d",
        "template_id": "0xd3adb00b5",
        "device": "mobile",
        "timestamp": "2023-01-01T12:00:00Z",
    },
}


@pytest.fixture
def account_id() -> str:
    """Test account ID."""
    return "test-account"


@pytest.fixture
def secret_key() -> str:
    """Test secret key."""
    return "test-secret"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
async def client(account_id: str, secret_key: str, base_url: str) -> AsyncAccessGrid:
    """Create an async test client."""
    client = AsyncAccessGrid(account_id, secret_key, config=ClientConfig(base_url=base_url))
    yield client
    await client.close()


@pytest.fixture
def sync_client(account_id: str, secret_key: str, base_url: str) -> AccessGrid:
    """Create a sync test client."""
    client = AccessGrid(account_id, secret_key, config=ClientConfig(base_url=base_url))
    yield client
    client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES
