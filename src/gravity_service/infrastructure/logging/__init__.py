"""
Logging package for the gravity service.

Structured JSON logging for deployed stages and human-readable logs for
local development, both configured through logging.config.dictConfig.
"""

from gravity_service.infrastructure.logging.formatters import (
    HumanReadableFormatter,
    StructuredFormatter,
)
from gravity_service.infrastructure.logging.service_logger import ServiceLogger

__all__ = [
    'ServiceLogger',
    'StructuredFormatter',
    'HumanReadableFormatter',
]
