"""Loads a service configuration from application.yaml plus stage overrides."""
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from dotenv import load_dotenv

from gravity_service.base.base_application_config import BaseApplicationConfig
from gravity_service.infrastructure.logging.bootstrap_logging import get_bootstrap_logger

T = TypeVar('T', bound=BaseApplicationConfig)

logger = logging.getLogger(__name__)

BASE_FILE = "application.yaml"


class ServiceConfigLoader:
    """
    Builds a validated config object from the files in ``CONFIG_DIR``.

    Load order, later sources winning:

    1. ``application.yaml``
    2. ``application-{STAGE}.yaml``, deep-merged when present
    3. ``${NAME}`` / ``${NAME:default}`` placeholders resolved from the environment
    4. ``{CONFIGCLASS}__section__field`` environment variables

    A ``.env`` file in the working directory feeds the environment but never
    overrides variables that are already set.
    """

    PLACEHOLDER = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')

    @staticmethod
    def load_config(config_class: Type[T], service_name: Optional[str] = None) -> T:
        """
        Raises:
            ValueError: CONFIG_DIR is unset, a placeholder without default has
                no value, or the merged document fails validation
            FileNotFoundError: CONFIG_DIR or its application.yaml does not exist
        """
        if Path(".env").exists():
            load_dotenv(".env", override=False)

        boot_log = get_bootstrap_logger(service_name or config_class.__name__.lower())
        config_dir = ServiceConfigLoader._config_dir()
        stage = os.environ.get("STAGE", "local")
        boot_log.info("Loading configuration from %s for stage '%s'", config_dir, stage)

        base_file = config_dir / BASE_FILE
        if not base_file.is_file():
            raise FileNotFoundError(f"{BASE_FILE} not found in {config_dir}")
        document = ServiceConfigLoader._read_yaml(base_file)

        stage_file = config_dir / f"application-{stage}.yaml"
        if stage_file.is_file():
            boot_log.info("Merging stage overrides from %s", stage_file.name)
            ServiceConfigLoader._merge(document, ServiceConfigLoader._read_yaml(stage_file))
        elif stage != "local":
            boot_log.warning("No %s, using %s only", stage_file.name, BASE_FILE)

        document = ServiceConfigLoader._resolve_placeholders(document)
        ServiceConfigLoader._apply_env_overrides(document, f"{config_class.__name__.upper()}__")
        document.setdefault("stage", stage)

        return config_class.model_validate(document)

    @staticmethod
    def _config_dir() -> Path:
        raw = os.environ.get("CONFIG_DIR")
        if not raw:
            raise ValueError("CONFIG_DIR environment variable must be set, e.g. CONFIG_DIR=./config")
        config_dir = Path(raw)
        if not config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {config_dir}")
        return config_dir

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with path.open() as stream:
            return yaml.safe_load(stream) or {}

    @staticmethod
    def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """Merge nested mappings in place; any other value replaces the target's."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                ServiceConfigLoader._merge(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _resolve_placeholders(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: ServiceConfigLoader._resolve_placeholders(v) for k, v in value.items()}
        if isinstance(value, list):
            return [ServiceConfigLoader._resolve_placeholders(v) for v in value]
        if isinstance(value, str):
            return ServiceConfigLoader.PLACEHOLDER.sub(ServiceConfigLoader._placeholder_value, value)
        return value

    @staticmethod
    def _placeholder_value(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        resolved = os.environ.get(name, default)
        if resolved is None:
            raise ValueError(f"Environment variable '{name}' is required by the configuration")
        return resolved

    @staticmethod
    def _apply_env_overrides(document: Dict[str, Any], marker: str) -> None:
        # Values stay strings; pydantic coerces them during validation
        for env_var, value in os.environ.items():
            if not env_var.startswith(marker):
                continue
            *sections, field = env_var[len(marker):].lower().split('__')
            target = document
            for section in sections:
                target = target.setdefault(section, {})
                if not isinstance(target, dict):
                    raise ValueError(
                        f"Environment override {env_var} addresses a field inside "
                        f"'{section}', which is not a configuration section"
                    )
            target[field] = value
            logger.debug("Applied environment override", extra={"variable": env_var})
