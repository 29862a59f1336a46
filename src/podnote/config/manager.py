"""Configuration manager for loading and saving Podnote config."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from podnote.config.schema import PodnoteConfig
from podnote.utils.errors import InvalidConfigError
from podnote.utils.paths import get_config_dir

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the Podnote configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        self.config_dir = config_dir or get_config_dir()
        self.config_file = self.config_dir / "config.yaml"

    def load_config(self) -> PodnoteConfig:
        """Load and validate configuration.

        Returns:
            Validated PodnoteConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            config = PodnoteConfig()
            self.save_config(config)
            return config

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: expected a mapping"
                )
            return PodnoteConfig(**data)
        except (yaml.YAMLError, ValidationError) as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: PodnoteConfig) -> None:
        """Save configuration.

        Args:
            config: PodnoteConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.debug(f"Saved configuration to {self.config_file}")

    def set_value(self, key: str, value: str) -> PodnoteConfig:
        """Set one configuration value from its string form and save.

        Args:
            key: Field name
            value: Raw value; booleans accept true/yes/1

        Returns:
            The updated configuration

        Raises:
            InvalidConfigError: If the key is unknown or the value invalid
        """
        config = self.load_config()

        if key not in PodnoteConfig.model_fields:
            raise InvalidConfigError(f"Unknown config key: {key}")

        converted: bool | str = value
        if PodnoteConfig.model_fields[key].annotation is bool:
            converted = value.lower() in ("true", "yes", "1")

        try:
            setattr(config, key, converted)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for {key}: {value}") from e

        self.save_config(config)
        return config
