"""Configuration loader - file, environment and defaults."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from patternkit.config.schemas.app_schema import AppConfig, validate_config
from patternkit.config.utils.env_expansion import expand_config_env_vars
from patternkit.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERNKIT_"

# environment variable -> (section, key); a None section means top level
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file"),
    f"{ENV_PREFIX}OUTPUT_FORMAT": (None, "output_format"),
    f"{ENV_PREFIX}DEMO_SEED": (None, "demo_seed"),
}


class ConfigurationLoader:
    """Loads configuration from an optional JSON/YAML file plus environment overrides."""

    def load_file(self, path: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file."""
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        text = config_path.read_text(encoding="utf-8")
        try:
            if config_path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        logger.debug("Loaded configuration file %s", path)
        return data

    def apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERNKIT_* environment variables on top of file values."""
        result = dict(data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None or value == "":
                continue
            if section is None:
                result[key] = value
                continue
            section_data = dict(result.get(section) or {})
            if key == "file":
                file_data = dict(section_data.get("file") or {})
                file_data["path"] = value
                section_data["file"] = file_data
            else:
                section_data[key] = value
            result[section] = section_data
        return result

    def load(self, config_file: Optional[str] = None,
             overrides: Optional[Dict[str, Any]] = None) -> AppConfig:
        """
        Load and validate the application configuration.

        Args:
            config_file: Optional path to a JSON or YAML file
            overrides: Values applied last, e.g. from command line options

        Raises:
            ConfigurationError: If the file is unreadable or values are invalid
        """
        data: Dict[str, Any] = self.load_file(config_file) if config_file else {}
        data = expand_config_env_vars(data)
        data = self.apply_env_overrides(data)
        for key, value in (overrides or {}).items():
            if isinstance(value, dict):
                merged = dict(data.get(key) or {})
                merged.update(value)
                data[key] = merged
            else:
                data[key] = value

        try:
            return validate_config(data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", fields) from e
