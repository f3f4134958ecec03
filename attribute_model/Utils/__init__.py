from __future__ import annotations

from .Logger import LaravelStyleLogger, LogContext, get_logger, logger

__all__ = [
    "LaravelStyleLogger",
    "LogContext",
    "get_logger",
    "logger"
]
