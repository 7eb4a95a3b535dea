from typing import Protocol

from domain.models.currency import RateSnapshot


class ExchangeRateProvider(Protocol):
    """Upstream source of full rate tables, one request per base currency."""

    @property
    def name(self) -> str: ...

    async def fetch_latest(self, base_currency: str) -> RateSnapshot:
        """Raises UpstreamUnavailable on any network, HTTP or format failure."""
        ...

    async def close(self) -> None: ...
