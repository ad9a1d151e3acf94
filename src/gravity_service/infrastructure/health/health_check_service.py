"""
Aggregation of the registered health probes.

The overall status is the worst individual status: any unhealthy probe
makes the service unhealthy, otherwise any degraded probe degrades it.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from .health_check import HealthCheck, HealthStatus

logger = logging.getLogger(__name__)

_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


class HealthCheckService:
    """Holds the service's health probes and reports their combined state."""

    def __init__(self):
        self.checks: List[HealthCheck] = []

    def register_check(self, check: HealthCheck) -> None:
        self.checks.append(check)
        logger.info("Health check registered", extra={"check": check.get_name()})

    def register_checks(self, checks: List[HealthCheck]) -> None:
        for check in checks:
            self.register_check(check)

    def get_registered_checks(self) -> List[str]:
        return [check.get_name() for check in self.checks]

    def check_health(self) -> Dict[str, Any]:
        """
        Run every probe and combine the results.

        Returns:
            Dict with the overall `status`, a summary `message`, a UTC
            `timestamp`, per-probe `checks` and the names of failed and
            degraded probes.
        """
        results: Dict[str, Dict[str, Any]] = {}
        for check in self.checks:
            results[check.get_name()] = self._run(check)

        failed = self._names_with(results, HealthStatus.UNHEALTHY)
        degraded = self._names_with(results, HealthStatus.DEGRADED)
        overall = max(
            (self._status_of(result) for result in results.values()),
            key=_SEVERITY.__getitem__,
            default=HealthStatus.HEALTHY,
        )

        return {
            "status": overall.value,
            "message": self._summarize(overall, failed, degraded),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": results,
            "failed_checks": failed,
            "degraded_checks": degraded,
        }

    def check_readiness(self) -> Dict[str, Any]:
        """Ready only while every probe reports healthy."""
        health = self.check_health()
        return {
            "ready": health["status"] == HealthStatus.HEALTHY.value,
            "status": health["status"],
            "message": health["message"],
            "timestamp": health["timestamp"],
        }

    @staticmethod
    def _run(check: HealthCheck) -> Dict[str, Any]:
        # A probe that raises counts as unhealthy instead of breaking the endpoint
        try:
            return check.check()
        except Exception as e:
            logger.error(
                f"Health check {check.get_name()} raised: {e}",
                extra={"check": check.get_name()},
            )
            return HealthCheck.result(HealthStatus.UNHEALTHY, f"Health check raised: {e}")

    @staticmethod
    def _status_of(result: Dict[str, Any]) -> HealthStatus:
        try:
            return HealthStatus(result.get("status"))
        except ValueError:
            return HealthStatus.UNHEALTHY

    @classmethod
    def _names_with(
        cls, results: Dict[str, Dict[str, Any]], status: HealthStatus
    ) -> List[str]:
        return [name for name, result in results.items() if cls._status_of(result) is status]

    @staticmethod
    def _summarize(overall: HealthStatus, failed: List[str], degraded: List[str]) -> str:
        if overall is HealthStatus.HEALTHY:
            return "All health checks passing"
        parts = []
        if failed:
            parts.append(f"Failed checks: {', '.join(failed)}")
        if degraded:
            parts.append(f"Degraded checks: {', '.join(degraded)}")
        return f"Service {overall.value}. " + ". ".join(parts)
