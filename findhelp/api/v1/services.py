import logging

from fastapi import APIRouter, Depends, HTTPException

from findhelp.api.v1.schemas import (
    CacheStatsSchema,
    OpeningStatusRequestSchema,
    OpeningStatusResponseSchema,
    OpeningStatusResultSchema,
)
from findhelp.application.ports.opening_status_cache import OpeningStatusCachePort
from findhelp.application.utils.time_format import format_distance
from findhelp.wiring.dependencies import get_opening_status_cache

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/services/opening-status", response_model=OpeningStatusResponseSchema)
def opening_status(
    req: OpeningStatusRequestSchema,
    cache: OpeningStatusCachePort = Depends(get_opening_status_cache),
):
    results = []
    for item in req.services:
        service = item.to_entity()
        try:
            status = cache.get_opening_status(service)
        except Exception as e:
            logger.exception("Failed to compute opening status", extra={"service_id": service.id, "reason": str(e)})
            raise HTTPException(status_code=500, detail="Failed to compute opening status")
        results.append(OpeningStatusResultSchema.from_status(service, status, format_distance(service.distance)))

    return OpeningStatusResponseSchema(results=results)


@router.get("/services/opening-status/cache", response_model=CacheStatsSchema)
def opening_status_cache_stats(
    cache: OpeningStatusCachePort = Depends(get_opening_status_cache),
):
    return CacheStatsSchema(**cache.get_stats())
