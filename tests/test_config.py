"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from sumkit import LogFormat, Settings, get_config, init
from sumkit._config import _detect_log_captures, _detect_log_format, _detect_log_level, current_settings

pytestmark = pytest.mark.usefixtures('reset_config')


class TestLogFormatEnum:
    """Tests for the LogFormat enum."""

    def test_values(self) -> None:
        assert LogFormat.JSON.value == 'json'
        assert LogFormat.CONSOLE.value == 'console'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            LogFormat('xml')


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.log_level is None
        assert settings.log_format == LogFormat.JSON
        assert settings.log_captures is True

    def test_settings_is_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_env_uppercased(self) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_empty_is_none(self) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_unset_is_none(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None


class TestDetectLogFormat:
    """Tests for _detect_log_format()."""

    def test_env_console(self) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_FORMAT': 'CONSOLE'}):
            assert _detect_log_format() == LogFormat.CONSOLE

    def test_env_invalid_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_FORMAT': 'xml'}):
            assert _detect_log_format() == LogFormat.JSON

    def test_unset_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_format() == LogFormat.JSON


class TestDetectLogCaptures:
    """Tests for _detect_log_captures()."""

    @pytest.mark.parametrize('value', ['0', 'false', 'No', ' OFF '])
    def test_false_values_disable(self, value: str) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_CAPTURES': value}):
            assert _detect_log_captures() is False

    @pytest.mark.parametrize('value', ['1', 'true', ''])
    def test_other_values_enable(self, value: str) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_CAPTURES': value}):
            assert _detect_log_captures() is True

    def test_unset_enables(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_captures() is True


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_stores_settings(self) -> None:
        settings = init(log_level='warning', log_format='console')
        assert settings == Settings(log_level='WARNING', log_format=LogFormat.CONSOLE)
        assert get_config() is settings
        assert logging.getLogger().level == logging.WARNING

    def test_init_accepts_enum(self) -> None:
        assert init(log_format=LogFormat.CONSOLE).log_format is LogFormat.CONSOLE

    def test_init_reads_environment(self) -> None:
        with patch.dict(os.environ, {'SUMKIT_LOG_LEVEL': 'error', 'SUMKIT_LOG_FORMAT': 'console'}):
            settings = init()
        assert settings.log_level == 'ERROR'
        assert settings.log_format is LogFormat.CONSOLE

    def test_init_log_captures(self) -> None:
        assert init(log_captures=False).log_captures is False
        with patch.dict(os.environ, {'SUMKIT_LOG_CAPTURES': 'off'}):
            assert init().log_captures is False

    def test_current_settings_before_init_is_default(self) -> None:
        assert current_settings() == Settings()

    def test_current_settings_after_init(self) -> None:
        settings = init(log_captures=False)
        assert current_settings() is settings

    def test_init_without_level_leaves_logging_alone(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch('sumkit._config.configure_logging') as configure:
            settings = init()
        configure.assert_not_called()
        assert settings.log_level is None
