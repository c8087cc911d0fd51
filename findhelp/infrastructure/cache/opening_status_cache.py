from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from findhelp.application.ports.opening_status_cache import OpeningStatusCachePort
from findhelp.application.use_cases.evaluate_opening_status import evaluate_opening_status
from findhelp.domain.entities.opening_status import OpeningStatus
from findhelp.domain.entities.service import Service

logger = logging.getLogger(__name__)

Evaluator = Callable[[Service, datetime], OpeningStatus]


@dataclass(frozen=True)
class CacheEntry:
    status: OpeningStatus
    calculated_at_ms: int


class OpeningStatusCache(OpeningStatusCachePort):
    """Per-minute cache of opening status keyed by service identity.

    Eviction is by insertion order: when full, the oldest inserted key goes.
    Reads do not refresh a key's position, re-inserts do.
    """

    def __init__(
        self,
        max_size: int = 500,
        cache_duration_ms: int = 60_000,
        sweep_interval_seconds: float = 300.0,
        evaluator: Evaluator = evaluate_opening_status,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_size = max_size
        self._cache_duration_ms = cache_duration_ms
        self._sweep_interval_seconds = sweep_interval_seconds
        self._evaluator = evaluator
        self._clock = clock
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._sweep_thread: threading.Thread | None = None

    def get_opening_status(self, service: Service) -> OpeningStatus:
        now_ts = self._clock()
        now_ms = int(now_ts * 1000)
        key = self._cache_key(service, now_ms)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None and now_ms - cached.calculated_at_ms < self._cache_duration_ms:
                return cached.status

        status = self._evaluator(service, datetime.fromtimestamp(now_ts))

        with self._lock:
            self._store(key, CacheEntry(status=status, calculated_at_ms=now_ms))
        return status

    def _cache_key(self, service: Service, now_ms: int) -> str:
        return f"{service.cache_identity}:{now_ms // 60_000}"

    def _store(self, key: str, entry: CacheEntry) -> None:
        # Caller holds the lock.
        self._entries.pop(key, None)
        if self._entries and len(self._entries) >= self._max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Opening status cache full", extra={"evicted": evicted, "cache_size": len(self._entries)})
        self._entries[key] = entry

    def cleanup(self) -> int:
        now_ms = int(self._clock() * 1000)
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now_ms - entry.calculated_at_ms >= self._cache_duration_ms
            ]
            for key in expired:
                del self._entries[key]
            size = len(self._entries)
        if expired:
            logger.info("Swept opening status cache", extra={"removed": len(expired), "cache_size": size})
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            size = len(self._entries)
        return {
            "size": size,
            "max_size": self._max_size,
            "cache_duration_ms": self._cache_duration_ms,
        }

    def start(self) -> None:
        if self._sweep_thread is not None and self._sweep_thread.is_alive():
            return
        self._stop_event.clear()
        self._sweep_thread = threading.Thread(
            target=self._run_sweep,
            name="opening-status-sweep",
            daemon=True,
        )
        self._sweep_thread.start()
        logger.info("Opening status cache sweep started")

    def stop(self) -> None:
        thread = self._sweep_thread
        if thread is None:
            return
        self._stop_event.set()
        thread.join()
        self._sweep_thread = None
        logger.info("Opening status cache sweep stopped")

    @property
    def is_running(self) -> bool:
        return self._sweep_thread is not None and self._sweep_thread.is_alive()

    def _run_sweep(self) -> None:
        while not self._stop_event.wait(self._sweep_interval_seconds):
            self.cleanup()
