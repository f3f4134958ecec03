from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Tuple


class Arr:
    """Laravel-style array helper class."""

    @staticmethod
    def wrap(value: Any) -> List[Any]:
        """Wrap the given value in an array if it's not already an array."""
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    @staticmethod
    def variadic(args: Tuple[Any, ...]) -> List[Any]:
        """
        Normalize the arguments of a "list or varargs" method.

        A single list/tuple argument is used as-is, otherwise the positional
        arguments themselves are the list: ``f(['a', 'b'])`` and ``f('a', 'b')``
        are equivalent.
        """
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            return list(args[0])
        return list(args)

    @staticmethod
    def only(data: Dict[Hashable, Any], keys: Iterable[Hashable]) -> Dict[Hashable, Any]:
        """Get the items of the array whose keys are listed, in the array's order."""
        allowed = set(keys)
        return {key: value for key, value in data.items() if key in allowed}

    @staticmethod
    def except_(data: Dict[Hashable, Any], keys: Iterable[Hashable]) -> Dict[Hashable, Any]:
        """Get all of the given array except for a specified array of keys."""
        excluded = set(keys)
        return {key: value for key, value in data.items() if key not in excluded}
