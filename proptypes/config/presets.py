"""
Predefined configuration presets.
"""
from typing import Dict, Any


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Settings used when nothing else is loaded."""
        return {
            'defaults': {
                'location': 'param',
                'subject_name': 'function'
            },
            'validation': {
                'enabled': True
            },
            'logging': {
                'log_level': 'WARNING',
                'enable_console': False,
                'enable_file': False,
                'enable_structured': False
            }
        }

    @staticmethod
    def development() -> Dict[str, Any]:
        """Verbose console logging, every check enabled."""
        return {
            'defaults': {
                'location': 'param',
                'subject_name': 'function'
            },
            'validation': {
                'enabled': True
            },
            'logging': {
                'log_level': 'DEBUG',
                'enable_console': True,
                'enable_file': False,
                'enable_structured': False
            }
        }

    @staticmethod
    def production() -> Dict[str, Any]:
        """Decorated parameter checks off, structured warnings to file."""
        return {
            'defaults': {
                'location': 'param',
                'subject_name': 'function'
            },
            'validation': {
                'enabled': False
            },
            'logging': {
                'log_level': 'WARNING',
                'enable_console': False,
                'enable_file': True,
                'enable_structured': True,
                'log_dir': 'logs/proptypes'
            }
        }
