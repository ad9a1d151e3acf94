"""
Domain errors raised by the gravity core.

Errors are raised where they are detected and propagate unchanged through
the services; only the web adapter translates them into HTTP responses.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gravity_service.core.model.celestial_body import CelestialBody


class GravityServiceError(Exception):
    """Base class for all gravity service domain errors."""


class ConfigurationMissingError(GravityServiceError, LookupError):
    """Raised when no gravity factor is configured for a celestial body."""

    def __init__(self, body: "CelestialBody"):
        self.body = body
        super().__init__(f"Gravity factor for {body.value} is not configured.")


class UnknownCelestialBodyError(GravityServiceError, ValueError):
    """Raised when an identifier does not name a known celestial body."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown celestial body: '{identifier}'")
