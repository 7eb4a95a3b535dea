from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_cache, get_rate_service, get_validation_service
from api.main import app
from application.services import CurrencyValidationService, RateService
from domain.models.currency import RateSnapshot
from infrastructure.cache.memory_cache import InMemoryCacheService


@pytest.fixture
def mock_provider():
    provider = Mock()
    provider.name = 'test-provider'
    provider.fetch_latest = AsyncMock(
        return_value=RateSnapshot(
            base='USD',
            rates={'USD': 1.0, 'EUR': 0.9, 'GBP': 0.8, 'JPY': 150.0},
            fetched_at=datetime(2025, 11, 5, 10, 30, tzinfo=UTC),
        )
    )
    return provider


@pytest.fixture
def cache():
    return InMemoryCacheService()


@pytest.fixture
def rate_service(mock_provider, cache):
    return RateService(provider=mock_provider, cache=cache)


@pytest.fixture
def validation_service(rate_service):
    return CurrencyValidationService(rate_service=rate_service)


@pytest.fixture
def client(cache, rate_service, validation_service):
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_rate_service] = lambda: rate_service
    app.dependency_overrides[get_validation_service] = lambda: validation_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
