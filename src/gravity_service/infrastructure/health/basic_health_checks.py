"""
Health probes registered by the gravity service.

Covers host resources, bootstrap completion, the loaded configuration and
completeness of the gravity factor table.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import psutil

from gravity_service.core.model.celestial_body import CelestialBody
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)
from gravity_service.infrastructure.health.health_check import (
    HealthCheck,
    HealthStatus,
)

logger = logging.getLogger(__name__)

_GIB = 1024**3


class SystemResourcesHealthCheck(HealthCheck):
    """
    Reports degraded while CPU or memory usage exceeds its threshold.

    Args:
        cpu_threshold: CPU usage in percent above which the host is degraded
        memory_threshold: memory usage in percent above which the host is degraded
        name: probe name
    """

    def __init__(
        self,
        cpu_threshold: float = 90.0,
        memory_threshold: float = 90.0,
        name: str = "system_resources",
    ):
        super().__init__(name)
        self.cpu_threshold = cpu_threshold
        self.memory_threshold = memory_threshold

    def check(self) -> Dict[str, Any]:
        try:
            cpu = psutil.cpu_percent(interval=0.1)
            memory = psutil.virtual_memory()
        except Exception as e:
            logger.error(f"Could not read system resources: {e}")
            return self.result(HealthStatus.UNHEALTHY, f"Could not read system resources: {e}")

        warnings = []
        if cpu > self.cpu_threshold:
            warnings.append(f"High CPU usage: {cpu:.1f}%")
        if memory.percent > self.memory_threshold:
            warnings.append(f"High memory usage: {memory.percent:.1f}%")

        return self.result(
            HealthStatus.DEGRADED if warnings else HealthStatus.HEALTHY,
            "; ".join(warnings) or "System resources within thresholds",
            {
                "cpu_percent": cpu,
                "memory_percent": memory.percent,
                "memory_available_gb": round(memory.available / _GIB, 2),
            },
        )


class ServiceStartupHealthCheck(HealthCheck):
    """Unhealthy until the bootstrap reports a successful start."""

    def __init__(self, name: str = "service_startup"):
        super().__init__(name)
        self.startup_completed = False
        self.startup_time: Optional[float] = None
        self.startup_errors: List[str] = []

    def mark_startup_completed(
        self, success: bool = True, error_message: Optional[str] = None
    ) -> None:
        self.startup_completed = True
        self.startup_time = time.time()
        if not success:
            self.startup_errors.append(error_message or "unknown error")

    def check(self) -> Dict[str, Any]:
        if not self.startup_completed:
            return self.result(HealthStatus.UNHEALTHY, "Service is still starting")
        if self.startup_errors:
            return self.result(
                HealthStatus.UNHEALTHY,
                f"Service startup failed: {'; '.join(self.startup_errors)}",
            )
        return self.result(
            HealthStatus.HEALTHY,
            "Service started",
            {"uptime_seconds": round(time.time() - self.startup_time, 3)},
        )


class ConfigurationHealthCheck(HealthCheck):
    """Verifies a configuration was loaded and names the service and stage."""

    REQUIRED_ATTRIBUTES = ("app_name", "stage")

    def __init__(self, config, name: str = "configuration"):
        super().__init__(name)
        self.config = config

    def check(self) -> Dict[str, Any]:
        if self.config is None:
            return self.result(HealthStatus.UNHEALTHY, "No configuration loaded")

        missing = [a for a in self.REQUIRED_ATTRIBUTES if not getattr(self.config, a, None)]
        if missing:
            return self.result(
                HealthStatus.UNHEALTHY, f"Configuration lacks: {', '.join(missing)}"
            )
        return self.result(
            HealthStatus.HEALTHY,
            "Configuration loaded",
            {"app_name": self.config.app_name, "stage": self.config.stage},
        )


class GravityTableHealthCheck(HealthCheck):
    """Unhealthy when any celestial body has no gravity factor configured."""

    def __init__(
        self,
        configuration: GravityConfigurationInterface,
        name: str = "gravity_factor_table",
    ):
        super().__init__(name)
        self.configuration = configuration

    def check(self) -> Dict[str, Any]:
        missing = [
            body.value
            for body in CelestialBody
            if self.configuration.find_gravity_factor(body) is None
        ]
        if missing:
            return self.result(
                HealthStatus.UNHEALTHY,
                f"Gravity factor missing for: {', '.join(missing)}",
                {"missing_bodies": missing},
            )
        return self.result(
            HealthStatus.HEALTHY,
            f"All {len(CelestialBody)} celestial bodies configured",
            {"configured_bodies": len(CelestialBody)},
        )
