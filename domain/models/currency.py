from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RateSnapshot:
    base: str
    rates: Mapping[str, float]
    fetched_at: datetime
    published_at: datetime | None = None  # upstream "timestamp", when sent


@dataclass
class CacheEntry:
    key: str
    value: Any
    expires_at: float | None  # None never expires

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    keys: int


@dataclass(frozen=True)
class DashboardView:
    base_currency: str
    target_currencies: list[str]
    rates: dict[str, float] = field(default_factory=dict)
    available_currencies: list[str] = field(default_factory=list)
    error: str | None = None  # Generic message only, never exception detail
