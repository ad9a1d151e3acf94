
from gravity_service.base.base_schema import BaseSchema


class BaseApplicationConfig(BaseSchema):
    """Base configuration that every service config inherits."""
    app_name: str
    version: str = "1.0.0"

    stage: str = "local"  # local | cicd | prod
