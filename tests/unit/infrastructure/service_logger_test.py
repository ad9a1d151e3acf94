"""
Unit tests for ServiceLogger and the logging formatters.

Tests environment-aware formatter selection, handler setup and the
rendering of structured `extra` fields.
"""

import json
import logging
from pathlib import Path
from typing import Generator

import pytest

from gravity_service.infrastructure.config.service_logging_config import (
    ServiceLoggingConfig,
)
from gravity_service.infrastructure.logging.bootstrap_logging import (
    get_bootstrap_logger,
    retire_bootstrap_logger,
)
from gravity_service.infrastructure.logging.formatters import (
    HumanReadableFormatter,
    StructuredFormatter,
)
from gravity_service.infrastructure.logging.service_logger import ServiceLogger


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run in a temporary directory and drop the configured handlers afterwards."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    for name in ("", "test-service", "gravity_service", "werkzeug"):
        configured = logging.getLogger(name)
        for handler in list(configured.handlers):
            handler.close()
            configured.removeHandler(handler)


def _make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="gravity_service.core", level=logging.INFO, pathname=__file__,
        lineno=1, msg="calculated %s", args=("force",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestServiceLoggerConfiguration:

    def test_stage_maps_to_environment(self) -> None:
        # Given / When
        local = ServiceLogger("test-service", "local")
        prod = ServiceLogger("test-service", "prod")

        # Then
        assert local.environment == "development"
        assert local.is_production_environment is False
        assert prod.environment == "production"
        assert prod.is_production_environment is True

    def test_local_stage_uses_human_readable_console(self, isolated_cwd: Path) -> None:
        # Given
        service_logger = ServiceLogger(
            "test-service", "local", ServiceLoggingConfig(level="debug", file_logging=False)
        )

        # When
        service_logger.configure()

        # Then
        logger = service_logger.get_logger()
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, HumanReadableFormatter)
        assert not (isolated_cwd / "logs").exists()

    def test_prod_stage_uses_json_and_error_file(self, isolated_cwd: Path) -> None:
        # Given
        service_logger = ServiceLogger(
            "test-service", "prod", ServiceLoggingConfig(file_logging=True)
        )

        # When
        service_logger.configure()

        # Then
        logger = service_logger.get_logger()
        assert all(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers)
        assert len(logger.handlers) == 3
        assert (isolated_cwd / "logs" / "test-service.log").exists()
        assert (isolated_cwd / "logs" / "test-service_errors.log").exists()

    def test_custom_file_path_creates_missing_directories(self, isolated_cwd: Path) -> None:
        # Given
        log_file = isolated_cwd / "var" / "log" / "gravity.log"
        service_logger = ServiceLogger(
            "test-service", "local",
            ServiceLoggingConfig(file_logging=True, file_path=str(log_file)),
        )

        # When
        service_logger.configure()

        # Then
        assert log_file.exists()
        assert not (isolated_cwd / "logs").exists()

    def test_third_party_logger_levels(self, isolated_cwd: Path) -> None:
        # Given
        config = ServiceLoggingConfig(
            file_logging=False,
            third_party_loggers={"werkzeug": {"level": "ERROR"}},
        )

        # When
        ServiceLogger("test-service", "local", config).configure()

        # Then
        assert logging.getLogger("werkzeug").level == logging.ERROR


class TestFormatters:

    def test_structured_formatter_renders_extra_fields(self) -> None:
        # Given
        formatter = StructuredFormatter("gravity-service", environment="production")
        record = _make_record(body="Earth", force_n=980.7)

        # When
        entry = json.loads(formatter.format(record))

        # Then
        assert entry["service"] == "gravity-service"
        assert entry["message"] == "calculated force"
        assert entry["level"] == "INFO"
        assert entry["extra_body"] == "Earth"
        assert entry["extra_force_n"] == 980.7

    def test_human_readable_formatter_appends_extra_fields(self) -> None:
        # Given
        formatter = HumanReadableFormatter("gravity-service")
        record = _make_record(body="Moon")

        # When
        line = formatter.format(record)

        # Then
        assert "calculated force" in line
        assert "gravity-service" in line
        assert line.endswith("[body=Moon]")


class TestBootstrapLogging:

    def test_bootstrap_logger_installs_single_handler(self) -> None:
        # Given
        first = get_bootstrap_logger("bootstrap-test")

        # When
        second = get_bootstrap_logger("bootstrap-test")

        # Then
        assert first is second
        assert len(first.handlers) == 1

        retire_bootstrap_logger("bootstrap-test")
        assert first.handlers == []
