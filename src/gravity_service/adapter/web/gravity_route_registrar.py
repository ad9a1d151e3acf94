"""
Route registrar for the gravity service.

Handles registration of the gravity calculation endpoints.
"""

import logging

from flask import Flask
from injector import Injector

from gravity_service.adapter.web.routes import DEFAULT_API_PREFIX, register_routes
from gravity_service.infrastructure.web.generic_flask_app_factory import RouteRegistrar

logger = logging.getLogger(__name__)


class GravityRouteRegistrar(RouteRegistrar):
    """Route registrar for gravity service specific endpoints."""

    def __init__(self, api_prefix: str = DEFAULT_API_PREFIX) -> None:
        self.api_prefix = api_prefix

    def register_routes(self, app: Flask, injector: Injector) -> None:
        """
        Register the calculation and bodies endpoints.

        Raises:
            Exception: Any wiring error; the calculation endpoints are mandatory
        """
        try:
            register_routes(app, injector, self.api_prefix)
        except Exception as e:
            logger.error(f"Failed to register gravity routes: {type(e).__name__}: {e}")
            raise
        logger.info(f"Gravity routes registered under {self.api_prefix}")
