from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from config import currencies


class Settings(BaseSettings):
	RATES_API_URL: str = 'https://api.exchangerate-api.com/v4/latest'
	UPSTREAM_TIMEOUT: int = 10
	UPSTREAM_RETRY_ATTEMPTS: int = 3

	# Cache
	CACHE_DEFAULT_TTL: int = 900
	CACHE_CHECK_PERIOD: int = 60

	# Currencies
	DEFAULT_BASE_CURRENCY: str = currencies.DEFAULT_BASE_CURRENCY
	DEFAULT_TARGET_CURRENCIES: list[str] = list(currencies.DEFAULT_TARGET_CURRENCIES)

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Currency Dashboard API'
	DEBUG: bool = True

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
