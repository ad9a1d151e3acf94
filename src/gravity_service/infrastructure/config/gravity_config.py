"""Service-specific configuration for the gravity service."""
from pydantic import Field

from gravity_service.base.base_application_config import BaseApplicationConfig
from gravity_service.base.base_schema import BaseSchema
from gravity_service.infrastructure.config.service_logging_config import (
    ServiceLoggingConfig,
)


class WebConfig(BaseSchema):
    """HTTP server settings."""
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    api_prefix: str = "/api/v1/gravity"


class GravityConfig(BaseApplicationConfig):
    """Configuration for the gravity service."""
    app_name: str = "gravity-service"
    web: WebConfig = Field(default_factory=WebConfig)
    logging: ServiceLoggingConfig = Field(default_factory=ServiceLoggingConfig)
