from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional, Union

from attribute_model.config import logging as logging_config

LogContext = Dict[str, Union[str, int, float, bool, None]]


class LaravelStyleLogger:
    """Laravel-style logger implementation."""

    def __init__(self, name: str = __name__) -> None:
        self.name = name
        self.logger = logging.getLogger(name)

        if not self.logger.handlers:
            self._setup_default_handler()

    def _setup_default_handler(self) -> None:
        """Set up default logging handler from the configured channel."""
        channel: Dict[str, Any] = logging_config.channels[logging_config.default]

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(channel['format'], datefmt=channel['date_format'])
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(logging_config.level_for(channel['level']))

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message, context))

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, context))

    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


def get_logger(name: Optional[str] = None) -> LaravelStyleLogger:
    """Get a Laravel-style logger instance."""
    if name is None:
        name = 'attribute_model'
    return LaravelStyleLogger(name)


# Package-wide logger instance
logger = get_logger('attribute_model')
