"""
Configuration management for proptypes.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy
from ..utils.logging_config import LoggerFactory, get_logger
from ..utils.exceptions import ConfigurationError, ProptypesError
from ..validation.factory import PropTypes as T
from ..validation.schema import Schema
from .presets import ConfigPresets

logger = get_logger(__name__)

DEFAULT_SCHEMA_NAME = 'proptypes'
ENV_PREFIX = 'PROPTYPES_'
ENV_NESTING_SEPARATOR = '__'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

CONFIG_SCHEMA = Schema(
    {
        'defaults': T.exact({
            'location': T.string.is_optional,
            'subject_name': T.string.is_optional,
        }).is_optional,
        'validation': T.exact({
            'enabled': T.bool.is_optional,
        }).is_optional,
        'logging': T.exact({
            'log_level': T.one_of(LOG_LEVELS).is_optional,
            'enable_console': T.bool.is_optional,
            'enable_file': T.bool.is_optional,
            'enable_structured': T.bool.is_optional,
            'log_dir': T.string.is_optional,
            'max_bytes': T.number.is_optional,
            'backup_count': T.number.is_optional,
        }).is_optional,
    },
    strict=True,
    name='config'
)


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = deepcopy(value)


class ConfigManager:
    """
    Centralized configuration with file, environment and dict sources.
    """

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._config = Config(deepcopy(defaults) if defaults is not None else ConfigPresets.default())
        self._schemas: Dict[str, Schema] = {DEFAULT_SCHEMA_NAME: CONFIG_SCHEMA}
        self.logger = get_logger(self.__class__.__name__)

    def _validate(self, data: Any, schema_name: Optional[str] = None) -> Dict[str, Any]:
        schema = self._schemas.get(schema_name or DEFAULT_SCHEMA_NAME, CONFIG_SCHEMA)
        try:
            return schema.validate(data)
        except ProptypesError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.message}",
                details={'schema': schema.name, 'error': e.to_dict()}
            ) from e

    def load_from_file(self, filepath: str, validate: bool = True):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
            validate: Whether to validate against the schema registered
                under the file's stem, or the default schema
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        if data is None:
            data = {}

        if validate:
            data = self._validate(data, path.stem if path.stem in self._schemas else None)

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: str = ENV_PREFIX, validate: bool = True):
        """
        Load configuration from environment variables.

        ``PROPTYPES_VALIDATION__ENABLED=false`` sets ``validation.enabled``.
        Values are parsed as JSON when possible and kept as strings otherwise.

        Args:
            prefix: Prefix for environment variables
            validate: Whether to validate the collected values
        """
        env_config = Config({})

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower()

            # Try to parse as JSON for complex types
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            env_config.set(config_key.replace(ENV_NESTING_SEPARATOR, '.'), parsed_value)

        data = env_config.to_dict()
        if validate:
            data = self._validate(data)

        self._config.update(data)
        self.logger.info(f"Loaded {len(data)} configuration section(s) from environment")

    def load_from_dict(self, data: Dict[str, Any], validate: bool = True, schema_name: Optional[str] = None):
        """
        Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            validate: Whether to validate against schema
            schema_name: Name of schema to use for validation
        """
        if validate:
            data = self._validate(data, schema_name)

        self._config.update(data)
        self.logger.info("Loaded configuration from dictionary")

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        self.logger.info(f"Saved configuration to {filepath}")

    def register_schema(self, name: str, schema: Schema):
        """Register a validation schema."""
        self._schemas[name] = schema
        self.logger.debug(f"Registered schema: {name}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config

    def apply_logging_config(self):
        """Reconfigure package logging from the ``logging`` section."""
        section = self._config.get('logging', {}) or {}
        LoggerFactory.configure(**section)
        self.logger.debug(f"Applied logging configuration: {section}")

    def reset(self, defaults: Optional[Dict[str, Any]] = None):
        """Drop everything loaded and start again from defaults."""
        self._config = Config(deepcopy(defaults) if defaults is not None else ConfigPresets.default())
        self.logger.info("Reset configuration")


class ConfigBuilder:
    """Builder for constructing configurations."""

    def __init__(self):
        self._config: Dict[str, Any] = {}

    def set_defaults(self, location: str = 'param', subject_name: str = 'function'):
        """Set the default location tag and subject name."""
        self._config['defaults'] = {
            'location': location,
            'subject_name': subject_name
        }
        return self

    def set_validation(self, enabled: bool = True):
        """Turn decorated parameter checks on or off."""
        self._config['validation'] = {'enabled': enabled}
        return self

    def set_logging_config(
        self,
        log_level: str = 'WARNING',
        enable_console: bool = False,
        enable_file: bool = False,
        enable_structured: bool = False,
        log_dir: Optional[str] = None
    ):
        """Set logging configuration."""
        self._config['logging'] = {
            'log_level': log_level,
            'enable_console': enable_console,
            'enable_file': enable_file,
            'enable_structured': enable_structured
        }
        if log_dir is not None:
            self._config['logging']['log_dir'] = log_dir
        return self

    def build(self, validate: bool = True) -> Dict[str, Any]:
        """Build and return the configuration."""
        config = deepcopy(self._config)
        if validate:
            try:
                CONFIG_SCHEMA.validate(config)
            except ProptypesError as e:
                raise ConfigurationError(f"Invalid configuration: {e.message}") from e
        return config


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _global_config_manager
    if _global_config_manager is None:
        _global_config_manager = ConfigManager()
    return _global_config_manager


def load_config(filepath: str):
    """Load configuration from file into global manager."""
    manager = get_config_manager()
    manager.load_from_file(filepath)


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value from global manager."""
    manager = get_config_manager()
    return manager.get(key, default)


def set_config(key: str, value: Any):
    """Set configuration value in global manager."""
    manager = get_config_manager()
    manager.set(key, value)
