from __future__ import annotations

from .GuardsAttributes import GuardsAttributes
from .HasAttributes import HasAttributes
from .HidesAttributes import HidesAttributes

__all__ = [
    "GuardsAttributes",
    "HasAttributes",
    "HidesAttributes"
]
