from __future__ import annotations

import inspect
from typing import Any, Callable, ClassVar, Dict, Hashable, List, Self, Union

from attribute_model.Support.Arr import Arr

Condition = Union[bool, Callable[..., Any]]


class HidesAttributes:
    """Laravel-style hidden/visible serialization preferences for models."""

    __hidden__: ClassVar[List[str]] = []
    __visible__: ClassVar[List[str]] = []

    _hidden: List[str]
    _visible: List[str]

    def __init__(self) -> None:
        self._hidden = list(type(self).__hidden__)
        self._visible = list(type(self).__visible__)
        super().__init__()

    def get_hidden(self) -> List[str]:
        """Get the hidden attributes for the model."""
        return self._hidden

    def set_hidden(self, hidden: List[str]) -> Self:
        """Set the hidden attributes for the model."""
        self._hidden = list(hidden)
        return self

    def get_visible(self) -> List[str]:
        """Get the visible attributes for the model."""
        return self._visible

    def set_visible(self, visible: List[str]) -> Self:
        """Set the visible attributes for the model."""
        self._visible = list(visible)
        return self

    def make_visible(self, *attributes: Any) -> Self:
        """
        Make the given, typically hidden, attributes visible.

        Accepts a list (``make_visible(['name', 'email'])``) or the keys as
        positional arguments (``make_visible('name', 'email')``).
        """
        keys = Arr.variadic(attributes)

        self._hidden = [key for key in self._hidden if key not in keys]

        if self._visible:
            self._visible = self._visible + keys

        return self

    def make_visible_if(self, condition: Condition, attributes: Any) -> Self:
        """Make the given, typically hidden, attributes visible if the given condition is true."""
        return self.make_visible(attributes) if self._evaluate_condition(condition) else self

    def make_hidden(self, *attributes: Any) -> Self:
        """Make the given, typically visible, attributes hidden."""
        self._hidden = self._hidden + Arr.variadic(attributes)
        return self

    def make_hidden_if(self, condition: Condition, attributes: Any) -> Self:
        """Make the given, typically visible, attributes hidden if the given condition is true."""
        return self.make_hidden(attributes) if self._evaluate_condition(condition) else self

    def get_arrayable_items(self, values: Dict[Hashable, Any]) -> Dict[Hashable, Any]:
        """Filter the values down to those that may be serialized."""
        if len(self.get_visible()) > 0:
            values = Arr.only(values, self.get_visible())

        if len(self.get_hidden()) > 0:
            values = Arr.except_(values, self.get_hidden())

        return values

    def _evaluate_condition(self, condition: Condition) -> bool:
        """Resolve a literal or a callable condition against this model."""
        if not callable(condition):
            return bool(condition)

        try:
            accepts_model = len(inspect.signature(condition).parameters) > 0
        except (TypeError, ValueError):
            accepts_model = True

        return bool(condition(self) if accepts_model else condition())
