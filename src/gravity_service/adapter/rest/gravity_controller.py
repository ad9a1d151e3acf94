"""
REST controller for gravity force calculations.

This controller parses HTTP query parameters into domain types, delegates
to the gravity calculator and translates domain errors into client errors.
"""

import logging
from abc import ABC, abstractmethod

from flask import jsonify, request
from injector import inject

from gravity_service.core.exceptions import (
    ConfigurationMissingError,
    UnknownCelestialBodyError,
)
from gravity_service.core.model.celestial_body import CelestialBody
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)
from gravity_service.core.service.gravity_calculator import GravityCalculatorInterface

logger = logging.getLogger(__name__)

SERVICE_NAME = "gravity-service"


class GravityControllerInterface(ABC):
    """
    Interface for the gravity controller.
    """

    @abstractmethod
    def calculate_force(self):
        """
        Handle a force calculation request.
        """
        pass

    @abstractmethod
    def list_bodies(self):
        """
        List all celestial bodies together with their gravity factor.
        """
        pass


@inject
class GravityController(GravityControllerInterface):
    """
    Controller for gravity calculation requests.
    """

    def __init__(
        self,
        calculator: GravityCalculatorInterface,
        configuration: GravityConfigurationInterface,
    ):
        self.calculator = calculator
        self.configuration = configuration

    def calculate_force(self):
        """
        Handle GET /calculate?mass=<float>&body=<identifier>.

        Returns JSON with mass, body and forceNewtons, or a 400 error payload.
        """
        raw_mass = request.args.get("mass")
        raw_body = request.args.get("body")

        if raw_mass is None or raw_body is None:
            return _client_error("Query parameters 'mass' and 'body' are required")

        try:
            mass = float(raw_mass)
        except ValueError:
            return _client_error(f"Invalid mass: '{raw_mass}' is not a number")

        try:
            body = CelestialBody.from_identifier(raw_body)
            result = self.calculator.calculate(mass, body)
        except UnknownCelestialBodyError as e:
            return _client_error(
                f"{e}. Supported bodies: {', '.join(CelestialBody.identifiers())}"
            )
        except ConfigurationMissingError as e:
            logger.error(
                "Gravity factor lookup failed",
                extra={"body": e.body.value},
            )
            return _client_error(str(e))

        return jsonify(result.to_response()), 200

    def list_bodies(self):
        """Handle GET /bodies."""
        factors = self.configuration.get_configured_bodies()
        bodies = [
            {"body": body.value, "gravityFactor": factors[body]}
            for body in CelestialBody
            if body in factors
        ]
        return jsonify({"bodies": bodies}), 200


def _client_error(message: str):
    return jsonify({"error": message, "service": SERVICE_NAME}), 400
