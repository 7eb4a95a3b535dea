import logging
from collections.abc import Iterable

from domain.exceptions.currency import CurrenciesFetchFailed, RatesFetchFailed, UpstreamUnavailable
from domain.models.currency import RateSnapshot
from infrastructure.cache.memory_cache import InMemoryCacheService
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    AVAILABLE_CURRENCIES_KEY = "available_currencies"

    def __init__(
        self,
        provider: ExchangeRateProvider,
        cache: InMemoryCacheService,
        default_base_currency: str = "USD",
    ):
        self.provider = provider
        self.cache = cache
        self.default_base_currency = default_base_currency

    def _make_rates_key(self, base_currency: str) -> str:
        return f"rates:{base_currency}"

    async def get_rates(self, base_currency: str, target_currencies: Iterable[str]) -> dict[str, float]:
        """Rates for each requested target, relative to ``base_currency``.

        The whole table for the base is fetched once and cached, so requests
        for different target sets share a single cache entry. Targets missing
        from the table are left out of the result.
        """
        snapshot = await self._get_snapshot(base_currency)

        result: dict[str, float] = {}
        missing: list[str] = []
        for code in target_currencies:
            if code in snapshot.rates:
                result[code] = snapshot.rates[code]
            else:
                missing.append(code)

        if missing:
            logger.warning(f"No rate for {', '.join(missing)} in {base_currency} table, omitting")

        return result

    async def get_available_currencies(self) -> list[str]:
        cached = self.cache.get(self.AVAILABLE_CURRENCIES_KEY)
        if cached is not None:
            return list(cached)

        try:
            snapshot = await self.provider.fetch_latest(self.default_base_currency)
        except UpstreamUnavailable as e:
            logger.error(f"Provider {self.provider.name} failed listing currencies: {e}")
            raise CurrenciesFetchFailed("Failed to fetch available currencies") from e

        currencies = tuple(snapshot.rates.keys())
        self.cache.set(self.AVAILABLE_CURRENCIES_KEY, currencies)
        logger.info(f"{self.provider.name} reports {len(currencies)} currencies")
        return list(currencies)

    async def _get_snapshot(self, base_currency: str) -> RateSnapshot:
        key = self._make_rates_key(base_currency)

        snapshot = self.cache.get(key)
        if snapshot is not None:
            return snapshot

        try:
            snapshot = await self.provider.fetch_latest(base_currency)
        except UpstreamUnavailable as e:
            logger.error(f"Provider {self.provider.name} failed for {base_currency}: {e}")
            raise RatesFetchFailed(f"Failed to fetch exchange rates for {base_currency}") from e

        self.cache.set(key, snapshot)
        return snapshot
