"""
Decoder Configuration - Centralized Settings
============================================

All configurable parameters in one place.
Supports environment variable overrides and YAML/JSON config files.

Usage:
    from aamva_decoder.config import get_config
    config = get_config()
    print(config.decoder.default_country)

Environment Variables:
    AAMVA_DEFAULT_COUNTRY=CAN
    AAMVA_MINOR_AGE=21
    AAMVA_LOG_LEVEL=DEBUG
    AAMVA_LOG_FILE=/var/log/aamva.log
"""

import os
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.definitions import IssuingCountry
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _get_env_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid int for {key}: {value}, using default {default}")
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class DecoderConfig:
    """Decoding policy configuration."""

    # Country whose date layout is used when a payload has no country element
    default_country: str = field(
        default_factory=lambda: _get_env_str('AAMVA_DEFAULT_COUNTRY', 'USA')
    )

    # Age threshold reported by the CLI minor check
    minor_age: int = field(
        default_factory=lambda: _get_env_int('AAMVA_MINOR_AGE', 18)
    )

    def validate(self):
        """
        Raises:
            ConfigurationError: If a setting has an unusable value
        """
        country = self.default_country
        if not isinstance(country, str) or IssuingCountry.of(country) is None:
            choices = ', '.join(c.value for c in IssuingCountry)
            raise ConfigurationError(
                f"Unknown default_country {country!r} (expected one of: {choices})"
            )
        # bool is an int subclass but never a meaningful age
        if isinstance(self.minor_age, bool) or not isinstance(self.minor_age, int):
            raise ConfigurationError(f"minor_age must be an integer, got {self.minor_age!r}")
        if self.minor_age < 0:
            raise ConfigurationError(f"minor_age must be non-negative, got {self.minor_age}")

    @property
    def issuing_country(self) -> IssuingCountry:
        self.validate()
        return IssuingCountry.of(self.default_country)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('AAMVA_LOG_LEVEL', 'INFO')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('AAMVA_LOG_FILE')
    )

    def validate(self):
        """
        Raises:
            ConfigurationError: If a setting has an unusable value
        """
        for name in ('level', 'format', 'date_format'):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"logging.{name} must be a string")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigurationError("logging.log_file must be a string")


@dataclass
class AppConfig:
    """Complete configuration."""

    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a YAML file."""
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'AppConfig':
        """
        Load configuration from a YAML (or JSON) file.

        Unknown keys are ignored; missing keys keep their defaults.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot load config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        config = cls()

        for section in ('decoder', 'logging'):
            values = data.get(section)
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ConfigurationError(f"Section '{section}' in {path} must be a mapping")
            target = getattr(config, section)
            for key, value in values.items():
                if hasattr(target, key):
                    setattr(target, key, value)

        config.decoder.validate()
        config.logging.validate()
        return config


# Global configuration instance (singleton pattern)
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = AppConfig()
        _setup_logging(_config.logging)
    return _config


def set_config(config: AppConfig):
    """Install a configuration (e.g. one loaded from a file) as the global instance."""
    global _config
    _config = config
    _setup_logging(config.logging)


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def _setup_logging(config: LoggingConfig):
    """Configure logging based on settings."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
    )
