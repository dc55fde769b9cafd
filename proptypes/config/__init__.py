"""
Configuration management for proptypes.
"""
from .config_manager import (
    CONFIG_SCHEMA,
    Config,
    ConfigManager,
    ConfigBuilder,
    get_config_manager,
    load_config,
    get_config,
    set_config
)
from .presets import ConfigPresets

__all__ = [
    'CONFIG_SCHEMA',
    'Config',
    'ConfigManager',
    'ConfigBuilder',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
    'ConfigPresets',
]
