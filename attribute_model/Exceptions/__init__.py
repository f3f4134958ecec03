from __future__ import annotations

from .MassAssignmentException import MassAssignmentException

__all__ = [
    "MassAssignmentException"
]
