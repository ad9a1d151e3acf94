import logging
from typing import Optional

from injector import Binder, Module, provider, singleton

from gravity_service.adapter.rest.gravity_controller import (
    GravityController,
    GravityControllerInterface,
)
from gravity_service.adapter.static.gravity_factor_table import GravityFactorTable
from gravity_service.base.base_application_config import BaseApplicationConfig
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)
from gravity_service.core.service.gravity_calculator import (
    GravityCalculator,
    GravityCalculatorInterface,
)
from gravity_service.infrastructure.config.gravity_config import GravityConfig
from gravity_service.infrastructure.health.health_check_service import (
    HealthCheckService,
)

logger = logging.getLogger(__name__)


class GravityModule(Module):
    """Dependency injection module for the gravity service.

    The gravity factor table is a singleton shared by every request; the
    calculator is unscoped and built fresh on each resolution.
    """

    def __init__(self, config: Optional[GravityConfig] = None) -> None:
        self._config = config or GravityConfig()

    @provider
    def provide_gravity_config(self) -> GravityConfig:
        """Provide the already loaded GravityConfig instance."""
        return self._config

    @provider
    def provide_application_config(self, config: GravityConfig) -> BaseApplicationConfig:
        return config

    @provider
    @singleton
    def provide_health_check_service(self) -> HealthCheckService:
        return HealthCheckService()

    def configure(self, binder: Binder) -> None:
        """Configure the module with necessary bindings."""
        # Core services
        binder.bind(GravityConfigurationInterface, to=GravityFactorTable, scope=singleton)
        binder.bind(GravityCalculatorInterface, to=GravityCalculator)

        # Adapters
        binder.bind(GravityControllerInterface, to=GravityController, scope=singleton)
        logger.debug("Gravity module bindings configured")
