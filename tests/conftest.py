"""
Pytest configuration and fixtures for mailcheck tests.

Provides:
- A mocked DoH resolver and a validator wired to it
- Test client for API testing with the validator dependency overridden
- DNS answer factory
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mailcheck.config import get_settings
from mailcheck.main import app
from mailcheck.services.email_validation import (
    DnsAnswer,
    DnsEmailValidator,
    DohResolver,
    get_email_validator,
    reset_email_validator,
)
from mailcheck.services.email_validation.mx import MX_RECORD_TYPE


@pytest.fixture
def dns_answer_factory():
    """Factory for DNS JSON answers."""

    def _create_answer(status: int = 0, record_types: list[int] | None = None) -> DnsAnswer:
        payload: dict = {"Status": status}
        if record_types is not None:
            payload["Answer"] = [
                {"name": "example.com", "type": record_type, "TTL": 300, "data": "10 mx.example.com."}
                for record_type in record_types
            ]
        return DnsAnswer.model_validate(payload)

    return _create_answer


@pytest.fixture
def mx_answer(dns_answer_factory) -> DnsAnswer:
    """Answer for a registered domain with one MX record."""
    return dns_answer_factory(status=0, record_types=[MX_RECORD_TYPE])


@pytest.fixture
def resolver(mx_answer) -> AsyncMock:
    """Mock resolver answering with an MX record by default."""
    mock = AsyncMock(spec=DohResolver)
    mock.lookup_mx.return_value = mx_answer
    return mock


@pytest.fixture
def validator(resolver) -> DnsEmailValidator:
    """Validator backed by the mock resolver."""
    return DnsEmailValidator(resolver)


@pytest.fixture(autouse=True)
def _reset_validator():
    """Drop the cached validator between tests."""
    reset_email_validator()
    get_settings.cache_clear()
    yield
    reset_email_validator()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(validator: DnsEmailValidator) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with the validator overridden."""
    app.dependency_overrides[get_email_validator] = lambda: validator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
