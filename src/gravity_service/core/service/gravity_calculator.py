"""
Force calculation service.

Computes the gravitational force acting on a mass on a given celestial
body using the gravity factors provided through the configuration port.
"""

import logging
from abc import ABC, abstractmethod

from injector import inject

from gravity_service.core.model.celestial_body import CelestialBody
from gravity_service.core.model.force_result import ForceResult
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)

logger = logging.getLogger(__name__)


class GravityCalculatorInterface(ABC):
    """
    Interface for the gravity calculator.
    """

    @abstractmethod
    def calculate_force(self, mass_in_kg: float, body: CelestialBody) -> float:
        """
        Calculate the force in Newtons acting on a mass on a celestial body.

        Args:
            mass_in_kg: Mass in kilograms, not validated
            body: Celestial body the mass is located on

        Returns:
            Force in Newtons

        Raises:
            ConfigurationMissingError: If no gravity factor is configured for the body
        """
        pass

    def calculate(self, mass_in_kg: float, body: CelestialBody) -> ForceResult:
        """
        Calculate the force and wrap it together with its inputs.

        Args:
            mass_in_kg: Mass in kilograms, not validated
            body: Celestial body the mass is located on

        Returns:
            ForceResult holding mass, body and force in Newtons
        """
        return ForceResult(
            mass=mass_in_kg,
            body=body,
            force_newtons=self.calculate_force(mass_in_kg, body),
        )


@inject
class GravityCalculator(GravityCalculatorInterface):
    """
    Stateless force calculator.

    force = mass * gravity factor, using plain float multiplication. Negative
    and zero masses are accepted; lookup errors propagate unchanged.
    """

    def __init__(self, configuration: GravityConfigurationInterface):
        """
        Initialize the calculator.

        Args:
            configuration: Source of gravity factors
        """
        self.configuration = configuration

    def calculate_force(self, mass_in_kg: float, body: CelestialBody) -> float:
        factor = self.configuration.get_gravity_factor(body)
        force = mass_in_kg * factor
        logger.debug(
            "Calculated gravitational force",
            extra={"mass_kg": mass_in_kg, "body": body.value, "factor": factor, "force_n": force},
        )
        return force
