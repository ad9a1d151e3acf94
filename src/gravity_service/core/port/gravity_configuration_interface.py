"""
Port interface for gravity factor lookups.

This interface defines the contract the force calculator relies on to
obtain the gravitational acceleration of a celestial body.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from gravity_service.core.exceptions import ConfigurationMissingError
from gravity_service.core.model.celestial_body import CelestialBody


class GravityConfigurationInterface(ABC):
    """
    Interface for gravity factor configuration.

    Implementations must be immutable after construction so that a single
    instance can be shared by concurrent callers without locking.
    """

    @abstractmethod
    def find_gravity_factor(self, body: CelestialBody) -> Optional[float]:
        """
        Look up the gravity factor of a celestial body.

        Args:
            body: The celestial body to look up

        Returns:
            Gravitational acceleration in m/s², or None if not configured
        """
        pass

    @abstractmethod
    def get_configured_bodies(self) -> Mapping[CelestialBody, float]:
        """
        Return a read-only view of all configured gravity factors.

        Returns:
            Mapping of celestial body to gravitational acceleration in m/s²
        """
        pass

    def get_gravity_factor(self, body: CelestialBody) -> float:
        """
        Return the gravity factor of a celestial body.

        Args:
            body: The celestial body to look up

        Returns:
            Gravitational acceleration in m/s²

        Raises:
            ConfigurationMissingError: If no factor is configured for the body
        """
        factor = self.find_gravity_factor(body)
        if factor is None:
            raise ConfigurationMissingError(body)
        return factor
