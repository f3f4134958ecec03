from __future__ import annotations

from .Model import JsonOption, Model

__all__ = [
    "JsonOption",
    "Model"
]
