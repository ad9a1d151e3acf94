from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base for all pydantic models of the service. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")
