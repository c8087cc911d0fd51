from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from findhelp.domain.entities.opening_status import OpeningStatus
from findhelp.domain.entities.service import Service


class OpeningStatusCachePort(ABC):
    @abstractmethod
    def get_opening_status(self, service: Service) -> OpeningStatus:
        """Cached status for the current minute, computing it on a miss."""
        raise NotImplementedError

    @abstractmethod
    def cleanup(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_stats(self) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def start(self) -> None:
        """Start the periodic sweep of expired entries."""
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError
