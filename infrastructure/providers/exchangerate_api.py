import logging
from datetime import UTC, datetime
from numbers import Real

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import UpstreamUnavailable
from domain.models.currency import RateSnapshot

logger = logging.getLogger(__name__)


class ExchangeRateAPIProvider:
    BASE_URL = "https://api.exchangerate-api.com/v4/latest"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
        retry_attempts: int = 3,
        retry_wait_min: float = 1,
        retry_wait_max: float = 10,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.retry_attempts = max(1, retry_attempts)
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "exchangerate-api"

    async def _get(self, url: str) -> httpx.Response:
        # Only transport failures are retried; an HTTP error status is final.
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=1, min=self.retry_wait_min, max=self.retry_wait_max),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await self._client.get(url)
                response.raise_for_status()
        return response

    async def _request(self, base_currency: str) -> dict:
        url = f"{self.base_url}/{base_currency}"

        try:
            response = await self._get(url)
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailable(f"{self.name} HTTP error {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailable(f"{self.name} request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise UpstreamUnavailable(f"{self.name} response parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise UpstreamUnavailable(f"{self.name} returned {type(data).__name__}, expected an object")

        return data

    async def fetch_latest(self, base_currency: str) -> RateSnapshot:
        data = await self._request(base_currency)

        rates = data.get("rates")
        if not isinstance(rates, dict):
            raise UpstreamUnavailable(f"{self.name} response has no rate table for {base_currency}")

        parsed: dict[str, float] = {}
        for code, value in rates.items():
            if isinstance(value, bool) or not isinstance(value, Real):
                raise UpstreamUnavailable(f"{self.name} returned non-numeric rate for {code}")
            parsed[str(code)] = float(value)

        logger.debug(f"Fetched {len(parsed)} rates for {base_currency} from {self.name}")

        return RateSnapshot(
            base=str(data.get("base") or base_currency).upper(),
            rates=parsed,
            fetched_at=datetime.now(UTC),
            published_at=self._parse_timestamp(data.get("timestamp", data.get("time_last_updated"))),
        )

    @staticmethod
    def _parse_timestamp(value) -> datetime | None:
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    async def close(self) -> None:
        await self._client.aclose()
