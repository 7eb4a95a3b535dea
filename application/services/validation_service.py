import asyncio
import logging
import re
from collections.abc import Iterable
from typing import Any

from application.services.rate_service import RateService
from config.currencies import DEFAULT_BASE_CURRENCY, DEFAULT_CURRENCIES, DEFAULT_TARGET_CURRENCIES
from domain.exceptions.currency import CurrenciesFetchFailed

logger = logging.getLogger(__name__)

CURRENCY_CODE_PATTERN = re.compile(r'[A-Z]{3}')


class CurrencyValidationService:
	"""Whitelist of accepted currency codes and sanitizers for raw request input.

	The whitelist starts as the static defaults and is replaced once, by
	:meth:`initialize`, with the codes the rate source reports. Sanitizers work
	against whichever set is current and never raise.
	"""

	def __init__(
		self,
		rate_service: RateService,
		default_currencies: Iterable[str] = DEFAULT_CURRENCIES,
		default_base_currency: str = DEFAULT_BASE_CURRENCY,
		default_target_currencies: Iterable[str] = DEFAULT_TARGET_CURRENCIES,
	):
		self.rate_service = rate_service
		self.default_base_currency = default_base_currency
		self.default_target_currencies = list(default_target_currencies)
		# Configured defaults must themselves pass validation
		self._valid_codes: frozenset[str] = (
			frozenset(default_currencies) | {default_base_currency} | set(self.default_target_currencies)
		)
		self._initialized = False
		self._init_lock = asyncio.Lock()

	@property
	def is_initialized(self) -> bool:
		return self._initialized

	async def initialize(self) -> None:
		async with self._init_lock:
			if self._initialized:
				logger.debug('Currency whitelist already initialized, skipping')
				return

			logger.info('Fetching available currencies for the whitelist...')
			try:
				currencies = await self.rate_service.get_available_currencies()
			except CurrenciesFetchFailed as e:
				logger.error(f'Failed to initialize currency whitelist: {e}')
				logger.info(f'Using {len(self._valid_codes)} default currency codes')
			else:
				self._valid_codes = frozenset(currencies) | {self.default_base_currency}
				logger.info(f'Initialized {len(self._valid_codes)} valid currency codes')

			self._initialized = True

	def is_valid(self, code: Any) -> bool:
		return (
			isinstance(code, str)
			and CURRENCY_CODE_PATTERN.fullmatch(code) is not None
			and code in self._valid_codes
		)

	def sanitize_base_currency(self, raw: Any) -> str:
		if raw is None:
			logger.debug(f'No base currency provided, using default: {self.default_base_currency}')
			return self.default_base_currency

		code = str(raw).upper().strip()
		if not self.is_valid(code):
			logger.warning(f'Invalid base currency: {raw!r}, using default: {self.default_base_currency}')
			return self.default_base_currency

		return code

	def sanitize_target_currencies(self, raw: Any) -> list[str]:
		if not raw:
			logger.debug('No target currencies provided, using defaults')
			return list(self.default_target_currencies)

		if isinstance(raw, (list, tuple)):
			items = list(raw)
		elif isinstance(raw, str):
			items = raw.split(',')
		else:
			items = [raw]

		codes = [str(item).upper().strip() for item in items]
		valid = [code for code in codes if self.is_valid(code)]

		if len(valid) < len(codes):
			invalid = [code for code in codes if not self.is_valid(code)]
			logger.warning(f'Filtered out {len(invalid)} invalid currency codes: {invalid}')

		if not valid:
			logger.warning(
				f'No valid target currencies found, using defaults: {", ".join(self.default_target_currencies)}'
			)
			return list(self.default_target_currencies)

		return valid

	def get_valid_currencies(self) -> list[str]:
		return sorted(self._valid_codes)
