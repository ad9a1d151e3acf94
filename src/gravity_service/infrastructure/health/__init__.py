"""Health check framework for the gravity service."""

from .health_check import HealthCheck, HealthStatus
from .health_check_service import HealthCheckService

__all__ = ["HealthCheck", "HealthStatus", "HealthCheckService"]
