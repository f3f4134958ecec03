from __future__ import annotations

import logging
from typing import Any, Dict

from .settings import settings

# Default logging configuration
default = 'stdout'

channels: Dict[str, Dict[str, Any]] = {
    'stdout': {
        'driver': 'stream',
        'level': settings.LOG_LEVEL,
        'format': settings.LOG_FORMAT,
        'date_format': settings.LOG_DATE_FORMAT,
    },
}


def level_for(name: str) -> int:
    """Resolve a configured level name such as ``debug`` to its logging constant."""
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING
