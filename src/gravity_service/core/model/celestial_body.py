from enum import Enum

from gravity_service.core.exceptions import UnknownCelestialBodyError


class CelestialBody(Enum):
    """
    Enum for the celestial bodies a gravity factor is known for.
    """

    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MOON = "Moon"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"

    @classmethod
    def from_identifier(cls, identifier: str) -> "CelestialBody":
        """
        Parse a client supplied identifier into a CelestialBody.

        Matches member values ("Earth") and member names ("EARTH")
        case-insensitively, ignoring surrounding whitespace.

        Args:
            identifier: Raw identifier, e.g. from a query parameter

        Returns:
            The matching CelestialBody

        Raises:
            UnknownCelestialBodyError: If no member matches
        """
        normalized = (identifier or "").strip().lower()
        for body in cls:
            if normalized in (body.value.lower(), body.name.lower()):
                return body
        raise UnknownCelestialBodyError(identifier)

    @classmethod
    def identifiers(cls) -> list[str]:
        """Return the display identifiers of all members in declaration order."""
        return [body.value for body in cls]
