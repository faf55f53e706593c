"""Configuration loader for garbler settings from YAML file."""

import numbers
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from garble.config.constants import DEFAULTS, PROBABILITY
from garble.errors import ConfigurationError
from garble.garbler.simple import SimpleGarbler, validate_probability
from garble.utils.logger import Logger, get_logger

logger = get_logger(__name__)


@dataclass
class GarblerConfig:
    """Settings needed to build a garbler.

    Attributes:
        probability: Replacement probability per leaf (0.0-1.0)
        seed: Seed for the random source, None for OS entropy
    """
    probability: float = DEFAULTS.PROBABILITY
    seed: Optional[int] = None


class ConfigLoader:
    """Load and manage configuration from YAML file."""

    def __init__(self, config_path: str = DEFAULTS.CONFIG_PATH):
        """Initialize config loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        logger.debug(f"Loaded configuration from {self.config_path}")

        # An empty file loads as None
        return config or {}

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Dictionary with logging settings
        """
        logging_config = self.config.get('logging', {}) or {}
        return {
            'level': logging_config.get('level', DEFAULTS.LOG_LEVEL),
            'log_to_file': logging_config.get('log_to_file', False),
            'log_dir': logging_config.get('log_dir', DEFAULTS.LOG_DIR),
        }

    def get_garbler_config(self) -> GarblerConfig:
        """Get garbler configuration as GarblerConfig object.

        Returns:
            GarblerConfig instance with loaded parameters

        Raises:
            ConfigurationError: If probability or seed is invalid
        """
        garbler_config = self.config.get('garbler', {}) or {}

        probability = validate_probability(
            garbler_config.get('probability', DEFAULTS.PROBABILITY)
        )

        seed = garbler_config.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigurationError(f"Seed must be an integer or null, got {seed!r}")

        return GarblerConfig(probability=probability, seed=seed)

    def validate_config(self) -> Dict[str, Any]:
        """Validate configuration and return validation results.

        Returns:
            Dictionary with validation results
        """
        errors = []
        warnings = []

        garbler_config = self.config.get('garbler')
        if not garbler_config:
            warnings.append(
                f"No garbler configuration found, using probability {DEFAULTS.PROBABILITY}"
            )
            garbler_config = {}

        probability = garbler_config.get('probability', DEFAULTS.PROBABILITY)
        if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
            errors.append(f"probability must be a number, got {probability!r}")
        elif not PROBABILITY.MIN <= probability <= PROBABILITY.MAX:
            errors.append(
                f"probability must be within [{PROBABILITY.MIN}, {PROBABILITY.MAX}], got {probability}"
            )
        elif probability == PROBABILITY.MIN:
            warnings.append("probability is 0.0, nothing will be garbled")

        seed = garbler_config.get('seed')
        if seed is None:
            warnings.append("No seed specified, garbling will not be reproducible")
        elif isinstance(seed, bool) or not isinstance(seed, int):
            errors.append(f"seed must be an integer, got {seed!r}")

        level = self.get_logging_config()['level']
        if not isinstance(level, str) or level.upper() not in (
            'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'
        ):
            errors.append(f"Unknown logging level: {level!r}")

        return {
            'valid': len(errors) == 0,
            'errors': errors,
            'warnings': warnings
        }

    def apply_logging_config(self):
        """Apply the logging section to the package logger.

        Raises:
            ConfigurationError: If the logging level is unknown
        """
        try:
            Logger.configure(**self.get_logging_config())
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def create_garbler(self) -> SimpleGarbler:
        """Create a garbler from the loaded configuration.

        Logging settings are applied first, so garbler construction is
        logged at the configured level.

        Returns:
            SimpleGarbler instance

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.apply_logging_config()
        garbler_config = self.get_garbler_config()
        return SimpleGarbler(garbler_config.probability, seed=garbler_config.seed)

    def reload(self):
        """Reload configuration from file."""
        self.config = self._load_config()


# Global config loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader(config_path: str = DEFAULTS.CONFIG_PATH) -> ConfigLoader:
    """Get global config loader instance.

    Args:
        config_path: Path to configuration file

    Returns:
        ConfigLoader instance
    """
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader(config_path)
    return _config_loader


def reload_config():
    """Reload global configuration."""
    global _config_loader
    if _config_loader is not None:
        _config_loader.reload()


def create_garbler_from_config(config_path: str = DEFAULTS.CONFIG_PATH) -> SimpleGarbler:
    """Build a garbler from a YAML configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        SimpleGarbler instance
    """
    return ConfigLoader(config_path).create_garbler()
