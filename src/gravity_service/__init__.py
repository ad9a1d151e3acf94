"""Gravity Service.

Computes the gravitational force acting on a mass on a given celestial body
and exposes the calculation over HTTP.
"""

__version__ = "0.1.0"

from .core.model.celestial_body import CelestialBody
from .core.service.gravity_calculator import (
    GravityCalculator,
    GravityCalculatorInterface,
)
from .adapter.static.gravity_factor_table import GravityFactorTable

__all__ = [
    "CelestialBody",
    "GravityCalculator",
    "GravityCalculatorInterface",
    "GravityFactorTable",
]
