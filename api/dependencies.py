import logging
from typing import Annotated

from fastapi import Depends

from application.services import CurrencyValidationService, DashboardService, RateService
from config.settings import get_settings
from infrastructure.cache.memory_cache import InMemoryCacheService
from infrastructure.providers import ExchangeRateAPIProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	cache: InMemoryCacheService | None = None
	provider: ExchangeRateProvider | None = None
	rate_service: RateService | None = None
	validation_service: CurrencyValidationService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.cache = InMemoryCacheService(
		default_ttl=settings.CACHE_DEFAULT_TTL,
		check_period=settings.CACHE_CHECK_PERIOD,
	)
	deps.provider = ExchangeRateAPIProvider(
		base_url=settings.RATES_API_URL,
		timeout=settings.UPSTREAM_TIMEOUT,
		retry_attempts=settings.UPSTREAM_RETRY_ATTEMPTS,
	)
	deps.rate_service = RateService(
		provider=deps.provider,
		cache=deps.cache,
		default_base_currency=settings.DEFAULT_BASE_CURRENCY,
	)
	deps.validation_service = CurrencyValidationService(
		rate_service=deps.rate_service,
		default_base_currency=settings.DEFAULT_BASE_CURRENCY,
		default_target_currencies=settings.DEFAULT_TARGET_CURRENCIES,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.cache:
		await deps.cache.stop()
	if deps.provider:
		await deps.provider.close()

	logger.info('Cleanup complete')


async def bootstrap() -> None:
	"""Bootstrap application data. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.cache is None or deps.validation_service is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	await deps.cache.start()
	# Failure here is absorbed by the validator, which keeps its defaults
	await deps.validation_service.initialize()

	logger.info('Bootstrap complete')


def get_cache() -> InMemoryCacheService:
	if deps.cache is None:
		raise RuntimeError('Cache not initialized')
	return deps.cache


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_validation_service() -> CurrencyValidationService:
	if deps.validation_service is None:
		raise RuntimeError('Validation service not initialized')
	return deps.validation_service


def get_dashboard_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	validation_service: Annotated[CurrencyValidationService, Depends(get_validation_service)],
) -> DashboardService:
	return DashboardService(rate_service=rate_service, validation_service=validation_service)
