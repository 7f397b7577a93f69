"""
Tests for configuration defaults, environment overrides and config files.

Run with: pytest tests/test_config.py -v
"""

import logging

import pytest
import yaml

from aamva_decoder.config import (
    AppConfig,
    DecoderConfig,
    LoggingConfig,
    get_config,
    reset_config,
    set_config,
)
from aamva_decoder.core.definitions import IssuingCountry
from aamva_decoder.exceptions import ConfigurationError


class TestDefaults:
    """Tests for default values."""

    def test_decoder_defaults(self):
        config = DecoderConfig()
        assert config.default_country == 'USA'
        assert config.minor_age == 18
        assert config.issuing_country is IssuingCountry.UNITED_STATES

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.level == 'INFO'
        assert config.log_file is None


class TestEnvironmentOverrides:
    """Tests for AAMVA_* environment variables."""

    def test_country_override(self, monkeypatch):
        monkeypatch.setenv('AAMVA_DEFAULT_COUNTRY', 'CAN')
        assert DecoderConfig().issuing_country is IssuingCountry.CANADA

    def test_minor_age_override(self, monkeypatch):
        monkeypatch.setenv('AAMVA_MINOR_AGE', '21')
        assert DecoderConfig().minor_age == 21

    def test_invalid_int_uses_default(self, monkeypatch, caplog):
        monkeypatch.setenv('AAMVA_MINOR_AGE', 'old')
        with caplog.at_level(logging.WARNING, logger='aamva_decoder'):
            assert DecoderConfig().minor_age == 18
        assert 'AAMVA_MINOR_AGE' in caplog.text

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv('AAMVA_LOG_LEVEL', 'DEBUG')
        assert LoggingConfig().level == 'DEBUG'


class TestValidation:
    """Tests for DecoderConfig.validate."""

    def test_country_is_case_insensitive(self):
        assert DecoderConfig(default_country='can').issuing_country is IssuingCountry.CANADA

    def test_unknown_country(self):
        with pytest.raises(ConfigurationError, match='MEX'):
            DecoderConfig(default_country='MEX').validate()

    def test_negative_minor_age(self):
        with pytest.raises(ConfigurationError):
            DecoderConfig(minor_age=-1).validate()

    @pytest.mark.parametrize("minor_age", ['abc', '18', 18.5, True, None])
    def test_minor_age_must_be_an_integer(self, minor_age):
        with pytest.raises(ConfigurationError, match='minor_age'):
            DecoderConfig(minor_age=minor_age).validate()

    def test_non_string_country(self):
        with pytest.raises(ConfigurationError):
            DecoderConfig(default_country=840).validate()

    def test_logging_values_must_be_strings(self):
        with pytest.raises(ConfigurationError, match='logging.level'):
            LoggingConfig(level=10).validate()
        with pytest.raises(ConfigurationError, match='logging.log_file'):
            LoggingConfig(log_file=['app.log']).validate()


class TestConfigFiles:
    """Tests for AppConfig.save and AppConfig.load."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / 'config.yaml'
        config = AppConfig(decoder=DecoderConfig(default_country='CAN', minor_age=21))
        config.save(path)

        loaded = AppConfig.load(path)
        assert loaded.decoder.default_country == 'CAN'
        assert loaded.decoder.minor_age == 21
        assert loaded.logging.level == 'INFO'

    def test_saved_file_is_yaml(self, tmp_path):
        path = tmp_path / 'config.yaml'
        AppConfig().save(path)
        data = yaml.safe_load(path.read_text())
        assert set(data) == {'decoder', 'logging'}

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('decoder:\n  minor_age: 19\n  unknown_key: 1\n')
        config = AppConfig.load(path)
        assert config.decoder.minor_age == 19
        assert config.decoder.default_country == 'USA'
        assert not hasattr(config.decoder, 'unknown_key')

    def test_json_file(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{"decoder": {"default_country": "CAN"}}')
        assert AppConfig.load(path).decoder.issuing_country is IssuingCountry.CANADA

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            AppConfig.load(tmp_path / 'missing.yaml')

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('decoder: [unclosed')
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('- one\n- two\n')
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)

    def test_invalid_country_in_file(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('decoder:\n  default_country: MEX\n')
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)

    @pytest.mark.parametrize("content", [
        'decoder: 5\n',
        'decoder: [18]\n',
        'logging: verbose\n',
    ])
    def test_section_not_a_mapping(self, tmp_path, content):
        path = tmp_path / 'config.yaml'
        path.write_text(content)
        with pytest.raises(ConfigurationError, match='must be a mapping'):
            AppConfig.load(path)

    @pytest.mark.parametrize("content", [
        'decoder:\n  minor_age: abc\n',
        'decoder:\n  minor_age: true\n',
        'decoder:\n  default_country: 840\n',
        'logging:\n  level: 10\n',
    ])
    def test_badly_typed_value(self, tmp_path, content):
        path = tmp_path / 'config.yaml'
        path.write_text(content)
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)

    def test_empty_section_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text('decoder:\nlogging:\n')
        assert AppConfig.load(path).decoder.minor_age == DecoderConfig().minor_age


class TestGlobalConfig:
    """Tests for the global configuration instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self):
        config = AppConfig(decoder=DecoderConfig(minor_age=21))
        set_config(config)
        assert get_config() is config

    def test_reset_config(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
