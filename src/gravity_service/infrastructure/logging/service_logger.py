"""
Logging setup for the gravity service.

``ServiceLogger`` turns a ``ServiceLoggingConfig`` into a
``logging.config.dictConfig`` document. Deployed stages (cicd, prod) log JSON
and keep a separate error file; local runs log human-readable lines.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from gravity_service.infrastructure.config.service_logging_config import (
    ServiceLoggingConfig,
)
from gravity_service.infrastructure.logging.formatters import (
    HumanReadableFormatter,
    StructuredFormatter,
)

PACKAGE_LOGGER_NAME = "gravity_service"

_STAGE_ENVIRONMENTS = {
    "local": "development",
    "cicd": "staging",
    "prod": "production",
}
_DEPLOYED_STAGES = ("cicd", "prod")
_ROTATING_HANDLER = "logging.handlers.RotatingFileHandler"


class ServiceLogger:
    """
    Applies the logging configuration of one service.

    Args:
        service_name: logger name of the service, e.g. 'gravity-service'
        stage: deployment stage ('local', 'cicd' or 'prod')
        config: logging section of the service config, defaults when omitted
    """

    def __init__(
        self,
        service_name: str,
        stage: str,
        config: Optional[ServiceLoggingConfig] = None
    ):
        self.service_name = service_name
        self.stage = stage
        self.config = config or ServiceLoggingConfig()
        self._logger_instance: Optional[logging.Logger] = None

    @property
    def environment(self) -> str:
        return _STAGE_ENVIRONMENTS.get(self.stage, "development")

    @property
    def is_production_environment(self) -> bool:
        return self.stage in _DEPLOYED_STAGES

    def configure(self) -> None:
        """Install formatters, handlers and loggers via dictConfig."""
        level = self.config.level.upper()
        formatter = "structured" if self._uses_json() else "human"
        handlers = self._build_handlers(formatter, level)

        for spec in handlers.values():
            if spec["class"] == _ROTATING_HANDLER:
                os.makedirs(os.path.dirname(spec["filename"]) or ".", exist_ok=True)

        logging.config.dictConfig({
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {formatter: self._build_formatter(formatter)},
            "handlers": handlers,
            "loggers": self._build_loggers(level, list(handlers)),
            "root": {"level": "WARNING", "handlers": list(handlers)},
        })

        self._logger_instance = logging.getLogger(self.service_name)
        self._logger_instance.info(
            "Logging configured",
            extra={
                "stage": self.stage,
                "environment": self.environment,
                "formatter": formatter,
                "log_level": level,
            },
        )

    def get_logger(self) -> logging.Logger:
        if self._logger_instance is None:
            self._logger_instance = logging.getLogger(self.service_name)
        return self._logger_instance

    def _uses_json(self) -> bool:
        return self.config.json_format or self.is_production_environment

    def _build_formatter(self, formatter: str) -> Dict[str, Any]:
        if formatter == "structured":
            return {
                "()": StructuredFormatter,
                "service_name": self.service_name,
                "environment": self.environment,
            }
        return {"()": HumanReadableFormatter, "service_name": self.service_name}

    def _rotating_file(self, filename: str, level: str, formatter: str) -> Dict[str, Any]:
        return {
            "class": _ROTATING_HANDLER,
            "level": level,
            "formatter": formatter,
            "filename": filename,
            "maxBytes": self.config.max_file_size,
            "backupCount": self.config.backup_count,
        }

    def _build_handlers(self, formatter: str, level: str) -> Dict[str, Dict[str, Any]]:
        handlers: Dict[str, Dict[str, Any]] = {}
        if self.config.console_enabled:
            handlers["console"] = {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            }
        if self.config.file_logging:
            handlers["file"] = self._rotating_file(
                self.config.file_path or f"logs/{self.service_name}.log", level, formatter
            )
        if self.is_production_environment:
            handlers["error_file"] = self._rotating_file(
                f"logs/{self.service_name}_errors.log", "ERROR", formatter
            )
        return handlers

    def _build_loggers(self, level: str, handler_names: list) -> Dict[str, Dict[str, Any]]:
        owned = {
            name: {"level": level, "handlers": handler_names, "propagate": False}
            for name in (self.service_name, PACKAGE_LOGGER_NAME)
        }
        third_party = {
            name: {
                "level": settings.get("level", "WARNING"),
                "handlers": handler_names,
                "propagate": False,
            }
            for name, settings in self.config.third_party_loggers.items()
        }
        return {**owned, **third_party}
