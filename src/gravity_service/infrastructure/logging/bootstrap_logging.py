"""Temporary logger for the phase before ServiceLogger is configured.

Configuration loading needs to report progress before the logging section of
the configuration is known. The bootstrap logger writes plain lines to stderr
and is retired once ``ServiceLogger.configure()`` takes over::

    log = get_bootstrap_logger("gravity-service")
    log.info("Loading configuration")
    retire_bootstrap_logger("gravity-service")
"""
from __future__ import annotations

import logging

_BOOTSTRAP_FORMAT = "%(asctime)s | BOOT | %(levelname)-8s | %(name)s | %(message)s"


def _bootstrap_name(service_name: str) -> str:
    return f"{service_name}.bootstrap"


def get_bootstrap_logger(service_name: str, level: int = logging.INFO) -> logging.Logger:
    """Return ``{service_name}.bootstrap``, attaching its stderr handler on first use."""
    logger = logging.getLogger(_bootstrap_name(service_name))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_BOOTSTRAP_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger


def retire_bootstrap_logger(service_name: str) -> None:
    """Detach the bootstrap handlers; calling it twice is harmless."""
    logger = logging.getLogger(_bootstrap_name(service_name))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


__all__ = ["get_bootstrap_logger", "retire_bootstrap_logger"]
