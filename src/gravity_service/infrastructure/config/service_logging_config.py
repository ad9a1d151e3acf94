"""
Logging configuration schema.

Pydantic model consumed by ServiceLogger; loaded from the `logging`
section of application.yaml.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from gravity_service.base.base_schema import BaseSchema


class ServiceLoggingConfig(BaseSchema):
    """Logging settings of a service."""

    level: str = Field(
        default="INFO",
        description="Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    console_enabled: bool = Field(default=True, description="Enable console logging")

    json_format: bool = Field(
        default=False,
        description="Force JSON formatting (always on in cicd and prod)",
    )

    file_logging: bool = Field(default=False, description="Enable rotating file logging")

    file_path: Optional[str] = Field(
        default=None,
        description="Custom log file path, defaults to logs/<service>.log",
    )

    max_file_size: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes before rotation",
    )

    backup_count: int = Field(default=5, description="Number of backup log files to keep")

    third_party_loggers: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-logger overrides for third-party libraries (e.g. werkzeug)",
    )
