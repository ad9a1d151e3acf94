"""
Flask application assembly for the gravity service.

The factory owns framework concerns only: settings, JSON error handlers,
request logging and the health probes. Business routes are contributed by a
``RouteRegistrar`` from the adapter layer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from flask import Flask, jsonify, request
from injector import Injector

from gravity_service.base.base_application_config import BaseApplicationConfig
from gravity_service.core.exceptions import GravityServiceError
from gravity_service.infrastructure.health.health_check_service import (
    HealthCheckService,
)

logger = logging.getLogger(__name__)


class RouteRegistrar(ABC):
    """Contributes the service's business routes to an application."""

    @abstractmethod
    def register_routes(self, app: Flask, injector: Injector) -> None:
        """Add routes to `app`, resolving controllers from `injector`; raise on failure."""
        pass


class DefaultRouteRegistrar(RouteRegistrar):
    """Registers nothing, leaving only the health probes."""

    def register_routes(self, app: Flask, injector: Injector) -> None:
        return None


class GenericFlaskAppFactory:

    @staticmethod
    def create_app(
        service_name: str,
        injector: Injector,
        config: Optional[BaseApplicationConfig] = None,
        route_registrar: Optional[RouteRegistrar] = None,
    ) -> Flask:
        """
        Build the Flask application of a service.

        Args:
            service_name: Name reported in error and probe payloads
            injector: Dependency graph the routes resolve their controllers from
            config: Application config, resolved from the injector when omitted
            route_registrar: Business routes, health probes only when omitted

        Returns:
            Flask: The configured application, not yet serving
        """
        config = config or injector.get(BaseApplicationConfig)

        app = Flask(service_name)
        app.config.update(
            DEBUG=False,
            TESTING=False,
            APP_NAME=config.app_name,
            APP_VERSION=config.version,
            STAGE=config.stage,
        )
        app.json.sort_keys = False

        GenericFlaskAppFactory._register_error_handlers(app, service_name)
        GenericFlaskAppFactory._register_request_logging(app)
        GenericFlaskAppFactory._register_health_endpoints(app, injector, service_name)
        (route_registrar or DefaultRouteRegistrar()).register_routes(app, injector)

        logger.info(
            "Flask application created",
            extra={"service": service_name, "stage": config.stage, "routes": len(list(app.url_map.iter_rules()))},
        )
        return app

    @staticmethod
    def _register_error_handlers(app: Flask, service_name: str) -> None:

        def error_body(message: str):
            return jsonify({"error": message, "service": service_name})

        # Backstop for domain errors raised outside the controllers
        @app.errorhandler(GravityServiceError)
        def domain_error(error: GravityServiceError):
            logger.warning(
                "Domain error reached the application boundary",
                extra={"error_type": type(error).__name__, "error_message": str(error)},
            )
            return error_body(str(error)), 400

        @app.errorhandler(404)
        def not_found(error):
            return error_body("Endpoint not found"), 404

        @app.errorhandler(405)
        def method_not_allowed(error):
            return error_body("Method not allowed"), 405

        @app.errorhandler(500)
        def internal_error(error):
            logger.error(f"Internal server error: {error}", exc_info=True)
            return error_body("Internal server error"), 500

    @staticmethod
    def _register_request_logging(app: Flask) -> None:

        @app.before_request
        def log_request() -> None:
            logger.debug(f"Request: {request.method} {request.full_path}")

        @app.after_request
        def log_response(response):
            logger.debug(f"Response: {response.status_code} for {request.path}")
            return response

    @staticmethod
    def _register_health_endpoints(app: Flask, injector: Injector, service_name: str) -> None:

        @app.route("/health")
        def health():
            result = injector.get(HealthCheckService).check_health()
            return jsonify(result), 200 if result["status"] == "healthy" else 503

        @app.route("/health/ready")
        def readiness():
            result = injector.get(HealthCheckService).check_readiness()
            return jsonify(result), 200 if result["ready"] else 503

        @app.route("/health/live")
        def liveness():
            return jsonify({"status": "alive", "service": service_name}), 200
