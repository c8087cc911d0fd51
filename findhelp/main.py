import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from findhelp.api.v1.services import router as services_router
from findhelp.core.config import settings
from findhelp.wiring.dependencies import get_opening_status_cache

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service_id", "cache_size", "evicted", "removed", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cache = get_opening_status_cache()
    if settings.OPENING_STATUS_SWEEP_ENABLED:
        cache.start()
    try:
        yield
    finally:
        cache.stop()


app = FastAPI(title="Find Help Opening Status", version="1.0.0", lifespan=lifespan)

app.include_router(services_router, prefix="/api/v1", tags=["services"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
