import json

from pydantic import ConfigDict, Field

from gravity_service.base.base_schema import BaseSchema
from gravity_service.core.model.celestial_body import CelestialBody


class ForceResult(BaseSchema):
    """Result of a single force calculation. Transient, owned by the caller."""

    # Non-finite floats serialize as "NaN", "Infinity" and "-Infinity"
    model_config = ConfigDict(frozen=True, populate_by_name=True, ser_json_inf_nan="strings")

    mass: float
    body: CelestialBody
    force_newtons: float = Field(alias="forceNewtons")

    def to_response(self) -> dict:
        """Serialize to the camelCase payload returned by the REST adapter."""
        return json.loads(self.model_dump_json(by_alias=True))
