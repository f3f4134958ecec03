"""Tests for logging and configuration."""

from __future__ import annotations

import logging

import pytest

from attribute_model.config import Settings, settings
from attribute_model.config import logging as logging_config
from attribute_model.Utils import LaravelStyleLogger, get_logger


class TestLogger:
    """Test suite for the package logger."""

    def test_context_is_appended(self) -> None:
        """Test context values are rendered after the message."""
        logger = LaravelStyleLogger('attribute_model.tests')

        assert logger._format_message("Saved") == "Saved"
        assert logger._format_message("Saved", {'key': 'name', 'count': 2}) == "Saved | key=name | count=2"

    def test_levels_reach_standard_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test debug and warning records carry their level and context."""
        caplog.set_level(logging.DEBUG, logger='attribute_model.tests.levels')
        logger = get_logger('attribute_model.tests.levels')

        logger.debug("Discarded", {'key': 'a'})
        logger.warning("Refused")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.DEBUG, "Discarded | key=a"),
            (logging.WARNING, "Refused"),
        ]

    def test_handler_is_installed_once(self) -> None:
        """Test repeated lookups do not stack handlers."""
        get_logger('attribute_model.tests.handlers')
        logger = get_logger('attribute_model.tests.handlers')

        assert len(logger.logger.handlers) == 1
        assert logger.logger.level == logging_config.level_for(settings.LOG_LEVEL)

    def test_default_logger_name(self) -> None:
        """Test the package logger is the default."""
        assert get_logger().name == 'attribute_model'

    def test_level_names(self) -> None:
        """Test configured level names resolve to logging constants."""
        assert logging_config.level_for('debug') == logging.DEBUG
        assert logging_config.level_for('ERROR') == logging.ERROR
        assert logging_config.level_for('bogus') == logging.WARNING


class TestSettings:
    """Test suite for the settings defaults."""

    def test_defaults(self) -> None:
        """Test the documented defaults when no environment is set."""
        assert isinstance(settings, Settings)
        assert isinstance(Settings.JSON_OPTIONS, int)
        assert logging_config.default in logging_config.channels
        assert logging_config.channels['stdout']['format'] == settings.LOG_FORMAT
