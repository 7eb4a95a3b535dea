from pydantic import BaseModel, ConfigDict, Field


class DashboardResponse(BaseModel):
	base_currency: str = Field(..., description='Sanitized base currency actually used')
	target_currencies: list[str] = Field(..., description='Sanitized target currencies actually used')
	rates: dict[str, float] = Field(
		default_factory=dict, description='Rate per target; targets without a rate are omitted'
	)
	available_currencies: list[str] = Field(default_factory=list, description='Currencies offered upstream')
	error: str | None = Field(None, description='Generic message when rates could not be fetched')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'base_currency': 'USD',
				'target_currencies': ['EUR', 'GBP'],
				'rates': {'EUR': 0.92, 'GBP': 0.79},
				'available_currencies': ['USD', 'EUR', 'GBP', 'JPY'],
				'error': None,
			}
		}
	)


class RatesResponse(BaseModel):
	base_currency: str = Field(..., description='Sanitized base currency actually used')
	rates: dict[str, float] = Field(..., description='Rate per target; targets without a rate are omitted')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(json_schema_extra={'examples': [{'currencies': ['USD', 'EUR', 'GBP', 'JPY']}]})


class ValidCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='Currency codes accepted as input')
	initialized: bool = Field(description='Whether the whitelist was loaded from the rate source')


class CacheStatsResponse(BaseModel):
	hits: int
	misses: int
	keys: int


class HealthResponse(BaseModel):
	status: str
	validator_initialized: bool
	cache: CacheStatsResponse
