"""
Configuration management.

Loads run settings from a YAML file and applies command-line overrides.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from card_autonumber.core.errors import ConfigurationError
from card_autonumber.core.models import AutoNumberConfig

DEFAULT_CONFIG_PATH = "autonumber.yaml"
CONFIG_ENV_VAR = "AUTONUMBER_CONFIG"


class AutoNumberConfigLoader:
    """
    Loads numbering settings from a YAML configuration file.

    Expected YAML format:
    ```yaml
    auto_number:
      file: decks/biology.typ   # or "stdin"
      log_level: INFO
      log_format: json
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

    def load(self) -> AutoNumberConfig:
        """
        Load and validate the configuration.

        Returns:
            Validated AutoNumberConfig

        Raises:
            ConfigurationError: If YAML is invalid or the section is malformed
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read {self.config_path}: {e}") from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        section = document.get("auto_number", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigurationError("'auto_number' section must be a mapping")

        return self._parse_section(section)

    def _parse_section(self, section: dict[str, Any]) -> AutoNumberConfig:
        """
        Map the YAML section onto the settings model.

        Args:
            section: Contents of the ``auto_number`` section

        Returns:
            Validated AutoNumberConfig
        """
        values: dict[str, Any] = {}
        if "file" in section:
            values["auto_number_file"] = None if section["file"] is None else str(section["file"])
        if "log_level" in section:
            values["log_level"] = section["log_level"]
        if "log_format" in section:
            values["log_format"] = section["log_format"]

        unknown = set(section) - {"file", "log_level", "log_format"}
        if unknown:
            raise ConfigurationError(
                f"Unknown keys in 'auto_number' section: {', '.join(sorted(unknown))}"
            )

        try:
            return AutoNumberConfig(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid 'auto_number' section: {e}") from e


def resolve_config_path(config_path: str | None = None) -> Path:
    """Pick the config path from the argument, AUTONUMBER_CONFIG, or the default."""
    return Path(config_path or os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))


def load_config(config_path: str | None = None, file_override: str | None = None) -> AutoNumberConfig:
    """
    Load configuration with an optional deck file override.

    A missing config file is only an error when no override is given;
    with ``file_override`` set, defaults fill in everything else.

    Args:
        config_path: Explicit YAML path (None to use env var or default)
        file_override: Deck file given on the command line

    Returns:
        AutoNumberConfig

    Raises:
        ConfigurationError: If the config cannot be loaded
    """
    path = resolve_config_path(config_path)

    if path.exists():
        config = AutoNumberConfigLoader(path).load()
    elif file_override is not None and config_path is None:
        config = AutoNumberConfig()
    else:
        raise ConfigurationError(f"Configuration file not found: {path}")

    if file_override is not None:
        config = config.model_copy(update={"auto_number_file": file_override})

    return config
