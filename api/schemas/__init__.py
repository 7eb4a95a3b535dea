from .responses import (
	CacheStatsResponse,
	DashboardResponse,
	HealthResponse,
	RatesResponse,
	SupportedCurrenciesResponse,
	ValidCurrenciesResponse,
)

__all__ = [
	'CacheStatsResponse',
	'DashboardResponse',
	'HealthResponse',
	'RatesResponse',
	'SupportedCurrenciesResponse',
	'ValidCurrenciesResponse',
]
