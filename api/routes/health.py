from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_cache, get_validation_service
from api.schemas import CacheStatsResponse, HealthResponse
from application.services import CurrencyValidationService
from infrastructure.cache.memory_cache import InMemoryCacheService

router = APIRouter(tags=['maintenance'])


def _stats_response(cache: InMemoryCacheService) -> CacheStatsResponse:
	stats = cache.get_stats()
	return CacheStatsResponse(hits=stats.hits, misses=stats.misses, keys=stats.keys)


@router.get('/health', response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(
	cache: Annotated[InMemoryCacheService, Depends(get_cache)],
	validation_service: Annotated[CurrencyValidationService, Depends(get_validation_service)],
) -> HealthResponse:
	return HealthResponse(
		status='ok',
		validator_initialized=validation_service.is_initialized,
		cache=_stats_response(cache),
	)


@router.get('/api/cache/stats', response_model=CacheStatsResponse, status_code=status.HTTP_200_OK)
async def cache_stats(
	cache: Annotated[InMemoryCacheService, Depends(get_cache)],
) -> CacheStatsResponse:
	return _stats_response(cache)


@router.delete('/api/cache', status_code=status.HTTP_204_NO_CONTENT)
async def flush_cache(
	cache: Annotated[InMemoryCacheService, Depends(get_cache)],
) -> None:
	cache.flush()
