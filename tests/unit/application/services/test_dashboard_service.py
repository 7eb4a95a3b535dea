# nosec B101


from unittest.mock import AsyncMock, Mock

import pytest

from application.services.dashboard_service import RATES_UNAVAILABLE_MESSAGE, DashboardService
from application.services.validation_service import CurrencyValidationService
from domain.exceptions.currency import CurrenciesFetchFailed, RatesFetchFailed
from domain.models.currency import DashboardView


@pytest.fixture
def rate_service():
    mock_service = Mock()
    mock_service.get_rates = AsyncMock(return_value={'EUR': 0.9, 'GBP': 0.8})
    mock_service.get_available_currencies = AsyncMock(return_value=['USD', 'EUR', 'GBP'])
    return mock_service


@pytest.fixture
def service(rate_service):
    validator = CurrencyValidationService(rate_service=rate_service)
    return DashboardService(rate_service=rate_service, validation_service=validator)


@pytest.mark.asyncio
async def test_build_returns_sanitized_inputs_and_rates(service, rate_service):
    view = await service.build('usd', 'eur, gbp')

    assert isinstance(view, DashboardView)
    assert view.base_currency == 'USD'
    assert view.target_currencies == ['EUR', 'GBP']
    assert view.rates == {'EUR': 0.9, 'GBP': 0.8}
    assert view.available_currencies == ['USD', 'EUR', 'GBP']
    assert view.error is None
    rate_service.get_rates.assert_awaited_once_with('USD', ['EUR', 'GBP'])


@pytest.mark.asyncio
async def test_build_with_missing_params_uses_defaults(service, rate_service):
    view = await service.build(None, None)

    assert view.base_currency == 'USD'
    assert view.target_currencies == ['EUR', 'GBP', 'JPY', 'CAD', 'AUD']
    rate_service.get_rates.assert_awaited_once_with('USD', ['EUR', 'GBP', 'JPY', 'CAD', 'AUD'])


@pytest.mark.asyncio
async def test_build_replaces_invalid_base(service, rate_service):
    view = await service.build('DROP TABLE', ['EUR'])

    assert view.base_currency == 'USD'
    rate_service.get_rates.assert_awaited_once_with('USD', ['EUR'])


@pytest.mark.asyncio
async def test_build_rates_failure_returns_generic_error(service, rate_service):
    rate_service.get_rates.side_effect = RatesFetchFailed('Failed to fetch exchange rates for USD')

    view = await service.build('USD', ['EUR'])

    assert view.error == RATES_UNAVAILABLE_MESSAGE
    assert view.rates == {}
    assert view.available_currencies == []
    assert view.base_currency == 'USD'
    assert view.target_currencies == ['EUR']


@pytest.mark.asyncio
async def test_build_currencies_failure_returns_generic_error(service, rate_service):
    rate_service.get_available_currencies.side_effect = CurrenciesFetchFailed('HTTP error 500: boom')

    view = await service.build('USD', ['EUR'])

    assert view.error == RATES_UNAVAILABLE_MESSAGE
    assert 'boom' not in view.error
