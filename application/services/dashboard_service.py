import logging
from typing import Any

from application.services.rate_service import RateService
from application.services.validation_service import CurrencyValidationService
from domain.exceptions.currency import CurrenciesFetchFailed, RatesFetchFailed
from domain.models.currency import DashboardView

logger = logging.getLogger(__name__)

RATES_UNAVAILABLE_MESSAGE = 'Failed to fetch exchange rates'


class DashboardService:
	def __init__(self, rate_service: RateService, validation_service: CurrencyValidationService):
		self.rate_service = rate_service
		self.validation_service = validation_service

	async def build(self, raw_base: Any, raw_targets: Any) -> DashboardView:
		base_currency = self.validation_service.sanitize_base_currency(raw_base)
		if raw_base and str(raw_base).upper().strip() != base_currency:
			logger.warning(f'Base currency {raw_base!r} replaced with {base_currency}')

		target_currencies = self.validation_service.sanitize_target_currencies(raw_targets)
		logger.debug(f'Using target currencies: {target_currencies}')

		try:
			rates = await self.rate_service.get_rates(base_currency, target_currencies)
			available_currencies = await self.rate_service.get_available_currencies()
		except (RatesFetchFailed, CurrenciesFetchFailed) as e:
			logger.error(f'Error building dashboard for {base_currency}: {e}')
			return DashboardView(
				base_currency=base_currency,
				target_currencies=target_currencies,
				error=RATES_UNAVAILABLE_MESSAGE,
			)

		return DashboardView(
			base_currency=base_currency,
			target_currencies=target_currencies,
			rates=rates,
			available_currencies=available_currencies,
		)
