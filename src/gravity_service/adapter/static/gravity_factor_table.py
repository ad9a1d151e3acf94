"""
Static gravity factor table.

Holds the canonical surface gravity of every supported celestial body.
The table is populated once at construction and never mutated, so a single
instance is shared across all request threads.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from gravity_service.core.model.celestial_body import CelestialBody
from gravity_service.core.port.gravity_configuration_interface import (
    GravityConfigurationInterface,
)

logger = logging.getLogger(__name__)

# Surface gravity in m/s²
CANONICAL_GRAVITY_FACTORS: Mapping[CelestialBody, float] = MappingProxyType(
    {
        CelestialBody.MERCURY: 3.7,
        CelestialBody.VENUS: 8.87,
        CelestialBody.EARTH: 9.807,
        CelestialBody.MOON: 1.62,
        CelestialBody.MARS: 3.71,
        CelestialBody.JUPITER: 24.79,
        CelestialBody.SATURN: 10.44,
        CelestialBody.URANUS: 8.69,
        CelestialBody.NEPTUNE: 11.15,
    }
)


class GravityFactorTable(GravityConfigurationInterface):
    """
    Immutable lookup table implementation of the gravity configuration port.
    """

    def __init__(self, factors: Optional[Mapping[CelestialBody, float]] = None):
        """
        Initialize the table.

        Args:
            factors: Optional replacement factors, defaults to the canonical table
        """
        source = CANONICAL_GRAVITY_FACTORS if factors is None else factors
        self._factors: Mapping[CelestialBody, float] = MappingProxyType(dict(source))

        missing = [body.value for body in CelestialBody if body not in self._factors]
        if missing:
            logger.warning(
                "Gravity factor table is incomplete",
                extra={"missing_bodies": missing},
            )

    def find_gravity_factor(self, body: CelestialBody) -> Optional[float]:
        return self._factors.get(body)

    def get_configured_bodies(self) -> Mapping[CelestialBody, float]:
        return self._factors
