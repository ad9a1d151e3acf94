"""Base contract for gravity service health probes."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional


class HealthStatus(Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class HealthCheck(ABC):
    """
    A single named probe reported by the health endpoints.

    Subclasses return a result dict with at least `status` (a HealthStatus
    value) and `message`; `details` is optional.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def check(self) -> Dict[str, Any]:
        """Run the probe, e.g. {"status": "healthy", "message": "All 9 celestial bodies configured"}."""
        pass

    def get_name(self) -> str:
        return self.name

    @staticmethod
    def result(
        status: HealthStatus, message: str, details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Build a probe result in the shape the aggregation expects."""
        outcome: Dict[str, Any] = {"status": status.value, "message": message}
        if details is not None:
            outcome["details"] = details
        return outcome
