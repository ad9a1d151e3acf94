"""
Startup sequence shared by Flask based services.

Subclasses supply the DI modules, routes, health checks and the serving
loop; the base class runs the phases in order and handles shutdown signals.
"""

import logging
import signal
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Type

from flask import Flask
from injector import Injector, Module

from gravity_service.base.base_application_config import BaseApplicationConfig
from gravity_service.infrastructure.config.service_config_loader import ServiceConfigLoader
from gravity_service.infrastructure.health.health_check import HealthCheck
from gravity_service.infrastructure.health.health_check_service import HealthCheckService
from gravity_service.infrastructure.logging.bootstrap_logging import retire_bootstrap_logger
from gravity_service.infrastructure.logging.service_logger import ServiceLogger
from gravity_service.infrastructure.web.generic_flask_app_factory import (
    GenericFlaskAppFactory,
    RouteRegistrar,
)

logger = logging.getLogger(__name__)


class ServiceBootstrap(ABC):
    """
    Runs a service through its startup phases.

    ``initialize`` performs config, logging, DI, health checks, web app and
    service start; ``start`` additionally enters the serving loop and owns
    the process exit code.
    """

    def __init__(self, service_name: str, config_class: Type[BaseApplicationConfig]):
        self.service_name = service_name
        self.config_class = config_class
        self.config: Optional[BaseApplicationConfig] = None
        self.injector: Optional[Injector] = None
        self.is_running = False
        self._flask_app: Optional[Flask] = None

    def start(self) -> None:
        """Initialize and serve; a startup failure exits the process with status 1."""
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)
        try:
            self.initialize()
            self.is_running = True
            logger.info(f"{self.service_name} is up")
            self._run_main_loop()
        except Exception as e:
            logger.error(f"{self.service_name} failed to start: {e}", exc_info=True)
            self._cleanup()
            sys.exit(1)

    def initialize(self, config: Optional[BaseApplicationConfig] = None) -> Flask:
        """
        Run every phase short of serving.

        Args:
            config: Already loaded configuration; files are read when omitted

        Returns:
            The wired Flask application
        """
        self.config = config or ServiceConfigLoader.load_config(
            self.config_class, service_name=self.service_name
        )

        retire_bootstrap_logger(self.service_name)
        ServiceLogger(
            service_name=self.service_name,
            stage=self.config.stage,
            config=getattr(self.config, "logging", None),
        ).configure()

        self.injector = Injector(self.get_dependency_modules(self.config))
        self.injector.get(HealthCheckService).register_checks(self.get_health_checks())

        self._flask_app = GenericFlaskAppFactory.create_app(
            service_name=self.service_name,
            injector=self.injector,
            config=self.config,
            route_registrar=self.get_route_registrar(),
        )
        self._start_service()
        logger.info(
            f"{self.service_name} initialized",
            extra={"stage": self.config.stage, "version": self.config.version},
        )
        return self._flask_app

    def stop(self) -> None:
        if not self.is_running:
            return
        logger.info(f"Stopping {self.service_name}")
        self._stop_service()
        self._cleanup()
        self.is_running = False

    def _signal_handler(self, signum: int, frame: object) -> None:
        logger.info(f"Received signal {signum}, shutting down")
        self.stop()
        sys.exit(0)

    @abstractmethod
    def get_dependency_modules(self, app_config: BaseApplicationConfig) -> List[Module]:
        """Modules binding the core ports to their adapters."""
        pass

    @abstractmethod
    def _start_service(self) -> None:
        pass

    @abstractmethod
    def _stop_service(self) -> None:
        pass

    @abstractmethod
    def _run_main_loop(self) -> None:
        """Serve until stopped, typically the web server."""
        pass

    def get_route_registrar(self) -> Optional[RouteRegistrar]:
        return None

    def get_health_checks(self) -> List[HealthCheck]:
        return []

    def get_flask_app(self) -> Optional[Flask]:
        return self._flask_app

    def _cleanup(self) -> None:
        """Release resources before exit; nothing to release by default."""
        pass
