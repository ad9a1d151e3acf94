"""
Gravity service bootstrap.

Implements the standard service bootstrap with the Flask web interface
serving the gravity calculation and health endpoints.
"""

import logging
import os
from typing import List

from injector import Module

from gravity_service.adapter.web.gravity_route_registrar import GravityRouteRegistrar
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)
from gravity_service.infrastructure.bootstrap.service_bootstrap import ServiceBootstrap
from gravity_service.infrastructure.config.gravity_config import GravityConfig
from gravity_service.infrastructure.di.gravity_module import GravityModule
from gravity_service.infrastructure.health.basic_health_checks import (
    ConfigurationHealthCheck,
    GravityTableHealthCheck,
    ServiceStartupHealthCheck,
    SystemResourcesHealthCheck,
)
from gravity_service.infrastructure.health.health_check import HealthCheck

logger = logging.getLogger(__name__)

SERVICE_NAME = "gravity-service"


class GravityServiceBootstrap(ServiceBootstrap):
    """Bootstrap implementation for the gravity service.

    Infrastructure responsibilities only: DI wiring, health checks and the
    web interface. The calculation itself lives in the core services.
    """

    def __init__(self) -> None:
        super().__init__(service_name=SERVICE_NAME, config_class=GravityConfig)
        self._startup_health_check = ServiceStartupHealthCheck("gravity_startup")

    def get_dependency_modules(self, app_config: GravityConfig) -> List[Module]:
        return [GravityModule(app_config)]

    def get_route_registrar(self) -> GravityRouteRegistrar:
        return GravityRouteRegistrar(api_prefix=self.config.web.api_prefix)

    def get_health_checks(self) -> List[HealthCheck]:
        return [
            SystemResourcesHealthCheck(name="gravity_system_resources"),
            self._startup_health_check,
            ConfigurationHealthCheck(self.config, "gravity_configuration"),
            GravityTableHealthCheck(self.injector.get(GravityConfigurationInterface)),
        ]

    def _start_service(self) -> None:
        """Resolve the core services once so wiring errors surface at startup."""
        try:
            table = self.injector.get(GravityConfigurationInterface)
            logger.info(
                "Gravity factor table loaded",
                extra={"configured_bodies": len(table.get_configured_bodies())},
            )
            self._startup_health_check.mark_startup_completed(success=True)
        except Exception as e:
            self._startup_health_check.mark_startup_completed(success=False, error_message=str(e))
            logger.error(f"Failed to start gravity service: {e}", exc_info=True)
            raise

    def _stop_service(self) -> None:
        logger.info("Gravity service stopped")

    def _run_main_loop(self) -> None:
        """Run the Flask development server; use a WSGI server in production."""
        web = self.config.web
        port = int(os.environ.get("PORT", web.port))
        debug_mode = os.environ.get("FLASK_DEBUG", str(web.debug)).lower() == "true"

        logger.info(f"Starting Flask application on {web.host}:{port}")
        self._flask_app.run(host=web.host, port=port, debug=debug_mode, threaded=True)


def bootstrap_gravity_service() -> None:
    """Bootstrap and run the gravity service."""
    GravityServiceBootstrap().start()
