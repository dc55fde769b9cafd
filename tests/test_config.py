"""Tests for configuration management."""
import json
import logging
import pytest
from proptypes import ConfigurationError, PropTypes as T, Schema
from proptypes.config import (
    CONFIG_SCHEMA,
    Config,
    ConfigBuilder,
    ConfigManager,
    ConfigPresets,
)


class TestConfig:
    """Tests for Config."""

    def test_dot_notation(self):
        """Test nested get and set."""
        config = Config({'logging': {'log_level': 'INFO'}})
        assert config.logging.log_level == 'INFO'
        assert config.get('logging.log_level') == 'INFO'
        assert config.get('logging.missing', 'fallback') == 'fallback'

        config.set('defaults.location', 'argument')
        assert config.get('defaults.location') == 'argument'
        assert 'defaults' in config

    def test_missing_attribute(self):
        """Test unknown attributes raise AttributeError."""
        with pytest.raises(AttributeError):
            Config({}).nothing

    def test_update_copies_values(self):
        """Test updates merge nested sections without sharing them."""
        source = {'logging': {'log_level': 'DEBUG'}}
        config = Config({'logging': {'enable_console': False}})
        config.update(source)
        source['logging']['log_level'] = 'ERROR'
        assert config.to_dict() == {'logging': {'enable_console': False, 'log_level': 'DEBUG'}}


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self):
        """Test a fresh manager starts from the default preset."""
        manager = ConfigManager()
        assert manager.get('validation.enabled') is True
        assert manager.get('defaults.location') == 'param'

    def test_load_from_dict(self):
        """Test loading a valid dictionary."""
        manager = ConfigManager()
        manager.load_from_dict({'validation': {'enabled': False}})
        assert manager.get('validation.enabled') is False
        assert manager.get('defaults.location') == 'param'

    def test_load_from_dict_invalid(self):
        """Test invalid dictionaries are rejected and nothing is applied."""
        manager = ConfigManager()
        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_from_dict({'validation': {'enabled': 'yes'}})
        assert 'config.validation.enabled' in str(exc_info.value)
        assert manager.get('validation.enabled') is True

        with pytest.raises(ConfigurationError):
            manager.load_from_dict({'unknown_section': {}})

    def test_registered_schema(self):
        """Test validating against a named schema."""
        manager = ConfigManager()
        manager.register_schema('plugin', Schema({'plugin': T.shape({'name': T.string})}))
        manager.load_from_dict({'plugin': {'name': 'x'}}, schema_name='plugin')
        assert manager.get('plugin.name') == 'x'
        with pytest.raises(ConfigurationError):
            manager.load_from_dict({'plugin': {'name': 1}}, schema_name='plugin')

    @pytest.mark.parametrize('filename, file_format', [
        ('settings.yaml', 'yaml'),
        ('settings.json', 'json'),
    ])
    def test_file_round_trip(self, tmp_path, filename, file_format):
        """Test saving and loading YAML and JSON files."""
        manager = ConfigManager()
        manager.set('logging.log_level', 'ERROR')
        path = tmp_path / filename
        manager.save_to_file(str(path), format=file_format)

        loaded = ConfigManager()
        loaded.load_from_file(str(path))
        assert loaded.get('logging.log_level') == 'ERROR'
        assert loaded.get_config().to_dict() == manager.get_config().to_dict()

    def test_empty_yaml_file(self, tmp_path):
        """Test an empty file loads as an empty configuration."""
        path = tmp_path / 'empty.yml'
        path.write_text('')
        manager = ConfigManager()
        manager.load_from_file(str(path))
        assert manager.get('validation.enabled') is True

    def test_invalid_file_contents(self, tmp_path):
        """Test file contents go through the schema."""
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps({'logging': {'log_level': 'LOUD'}}))
        with pytest.raises(ConfigurationError, match='expected one of'):
            ConfigManager().load_from_file(str(path))

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match='not found'):
            ConfigManager().load_from_file(str(tmp_path / 'absent.yaml'))

    def test_unsupported_format(self, tmp_path):
        """Test unknown suffixes are rejected."""
        path = tmp_path / 'settings.ini'
        path.write_text('[section]')
        with pytest.raises(ConfigurationError, match='Unsupported file format'):
            ConfigManager().load_from_file(str(path))
        with pytest.raises(ConfigurationError, match='Unsupported format'):
            ConfigManager().save_to_file(str(path), format='ini')

    def test_load_from_env(self, monkeypatch):
        """Test environment variables map onto nested keys."""
        monkeypatch.setenv('PROPTYPES_VALIDATION__ENABLED', 'false')
        monkeypatch.setenv('PROPTYPES_DEFAULTS__LOCATION', 'argument')
        manager = ConfigManager()
        manager.load_from_env()
        assert manager.get('validation.enabled') is False
        assert manager.get('defaults.location') == 'argument'

    def test_load_from_env_invalid(self, monkeypatch):
        """Test environment values are validated."""
        monkeypatch.setenv('PROPTYPES_LOGGING__MAX_BYTES', 'lots')
        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_env()

    def test_reset(self):
        """Test reset drops loaded values."""
        manager = ConfigManager()
        manager.set('validation.enabled', False)
        manager.reset()
        assert manager.get('validation.enabled') is True

    def test_apply_logging_config(self):
        """Test the logging section reconfigures the package logger."""
        manager = ConfigManager(ConfigPresets.development())
        manager.apply_logging_config()
        assert logging.getLogger('proptypes').level == logging.DEBUG


class TestConfigBuilder:
    """Tests for ConfigBuilder."""

    def test_build(self):
        """Test building a configuration."""
        config = (ConfigBuilder()
                  .set_defaults(location='argument')
                  .set_validation(enabled=False)
                  .set_logging_config(log_level='INFO', log_dir='var/log')
                  .build())
        assert config['defaults'] == {'location': 'argument', 'subject_name': 'function'}
        assert config['validation'] == {'enabled': False}
        assert config['logging']['log_dir'] == 'var/log'

    def test_invalid_log_level(self):
        """Test the builder validates what it builds."""
        builder = ConfigBuilder().set_logging_config(log_level='LOUD')
        with pytest.raises(ConfigurationError):
            builder.build()
        assert builder.build(validate=False)['logging']['log_level'] == 'LOUD'


class TestConfigPresets:
    """Tests for presets."""

    @pytest.mark.parametrize('preset', ['default', 'development', 'production'])
    def test_presets_are_valid(self, preset):
        """Test every preset passes the configuration schema."""
        assert CONFIG_SCHEMA.is_valid(getattr(ConfigPresets, preset)())

    def test_production_disables_checks(self):
        """Test the production preset turns decorated checks off."""
        assert ConfigPresets.production()['validation']['enabled'] is False
