from findhelp.core.config import settings
from findhelp.infrastructure.cache.opening_status_cache import OpeningStatusCache


_opening_status_cache: OpeningStatusCache | None = None


def get_opening_status_cache() -> OpeningStatusCache:
    global _opening_status_cache
    if _opening_status_cache is None:
        _opening_status_cache = OpeningStatusCache(
            max_size=settings.OPENING_STATUS_CACHE_MAX_SIZE,
            cache_duration_ms=settings.OPENING_STATUS_CACHE_DURATION_MS,
            sweep_interval_seconds=settings.OPENING_STATUS_SWEEP_INTERVAL_SECONDS,
        )
    return _opening_status_cache
