from __future__ import annotations

from typing import Any, Hashable, Type


class MassAssignmentException(Exception):
    """Exception raised when a totally guarded model is mass assigned"""

    def __init__(self, key: Hashable, model: Type[Any]) -> None:
        self.key = key
        self.model = model

        super().__init__(
            f"Add [{key}] to the fillable property to allow mass assignment "
            f"on [{model.__module__}.{model.__qualname__}]."
        )
