from __future__ import annotations

from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings"
]
