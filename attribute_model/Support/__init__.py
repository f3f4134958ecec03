from .Arr import Arr
from .Str import Str

__all__ = [
    "Arr",
    "Str"
]
