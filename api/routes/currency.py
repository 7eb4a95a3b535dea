from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_dashboard_service, get_rate_service, get_validation_service
from api.schemas import (
	DashboardResponse,
	RatesResponse,
	SupportedCurrenciesResponse,
	ValidCurrenciesResponse,
)
from application.services import CurrencyValidationService, DashboardService, RateService

router = APIRouter(prefix='/api', tags=['currency'])

BaseQuery = Annotated[str | None, Query(description='Base currency code, e.g. USD')]
TargetsQuery = Annotated[
	list[str] | None,
	Query(description='Target currency codes, repeated or comma-separated'),
]


def _raw_targets(targets: list[str] | None) -> list[str] | str | None:
	# ?targets=EUR,GBP arrives as a single item and is split by the validator
	if targets and len(targets) == 1:
		return targets[0]
	return targets


@router.get(
	'/dashboard',
	response_model=DashboardResponse,
	status_code=status.HTTP_200_OK,
	summary='Rates, selected currencies and available currencies for the dashboard',
)
async def get_dashboard(
	service: Annotated[DashboardService, Depends(get_dashboard_service)],
	base: BaseQuery = None,
	targets: TargetsQuery = None,
) -> DashboardResponse:
	view = await service.build(base, _raw_targets(targets))
	return DashboardResponse(
		base_currency=view.base_currency,
		target_currencies=view.target_currencies,
		rates=view.rates,
		available_currencies=view.available_currencies,
		error=view.error,
	)


@router.get(
	'/rates',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current exchange rates for a base currency',
)
async def get_rates(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	validation_service: Annotated[CurrencyValidationService, Depends(get_validation_service)],
	base: BaseQuery = None,
	targets: TargetsQuery = None,
) -> RatesResponse:
	base_currency = validation_service.sanitize_base_currency(base)
	target_currencies = validation_service.sanitize_target_currencies(_raw_targets(targets))

	rates = await rate_service.get_rates(base_currency, target_currencies)
	return RatesResponse(base_currency=base_currency, rates=rates)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies offered by the rate source',
)
async def get_available_currencies(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> SupportedCurrenciesResponse:
	currencies = await service.get_available_currencies()
	return SupportedCurrenciesResponse(currencies=currencies)


@router.get(
	'/currencies/valid',
	response_model=ValidCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currency codes accepted as input',
)
async def get_valid_currencies(
	service: Annotated[CurrencyValidationService, Depends(get_validation_service)],
) -> ValidCurrenciesResponse:
	return ValidCurrenciesResponse(
		currencies=service.get_valid_currencies(),
		initialized=service.is_initialized,
	)
