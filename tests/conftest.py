"""Shared fixtures for the twilio-api test suite."""

import pytest
import pytest_asyncio
import respx

from twilio_api import Client

BASE_URL = "https://api.twilio.com"
ACCOUNT_SID = "AC00000000000000000000000000000000"
AUTH_TOKEN = "test-auth-token"


@pytest.fixture
def twilio_mock():
    """Mock transport for the Twilio API host.

    Any request that no route matches fails the test.
    """
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def client():
    """Client with test credentials, closed after the test."""
    async with Client(ACCOUNT_SID, AUTH_TOKEN) as client:
        yield client
