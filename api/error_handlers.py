import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import CurrenciesFetchFailed, RatesFetchFailed

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(RatesFetchFailed)
	async def rates_fetch_failed_handler(request: Request, exc: RatesFetchFailed):
		logger.error(f'Rates fetch failed: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Exchange rates unavailable'})

	@app.exception_handler(CurrenciesFetchFailed)
	async def currencies_fetch_failed_handler(request: Request, exc: CurrenciesFetchFailed):
		logger.error(f'Currencies fetch failed: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Currency list unavailable'})
