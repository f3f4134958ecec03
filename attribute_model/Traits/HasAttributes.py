from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Pattern, Self

from attribute_model.Support.Arr import Arr
from attribute_model.Support.Str import Str


class HasAttributes:
    """
    Defines how a model manipulates its attributes.

    Sections:

    1. Attribute getting & setting.
    2. Attribute mutation.
    3. Change tracking.
    4. Serialization.

    Mutators are plain methods discovered by name each time a key is read or
    written. For the key ``first_name`` (or ``first-name``, ``firstName`` or
    ``FIRST_NAME``) the model looks for ``get_first_name_attribute(value)`` and
    ``set_first_name_attribute(value)``. Method names are matched ignoring case
    and underscores. A set mutator owns the write and must store into
    ``self._attributes`` itself.
    """

    # Numeric strings: optional sign, digits and/or a fraction,
    # optional exponent, optional surrounding whitespace
    _numeric_pattern: Pattern[str] = re.compile(
        r'^[ \t\n\r\v\f]*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?[ \t\n\r\v\f]*$'
    )

    _attributes: Dict[Hashable, Any]
    _original: Dict[Hashable, Any]
    _changes: Dict[Hashable, Any]

    def __init__(self) -> None:
        self._attributes = {}
        self._original = {}
        self._changes = {}
        super().__init__()

    # 1. Attribute getting & setting

    def get_attributes(self) -> Dict[Hashable, Any]:
        """Get all of the current attributes on the model."""
        return dict(self._attributes)

    def get_attribute(self, key: Hashable) -> Any:
        """Get an attribute from the model, or None when it is not set."""
        if key in self._attributes:
            return self.transform_model_value(key, self._attributes[key])
        return None

    def only(self, *attributes: Any) -> Dict[Hashable, Any]:
        """Get a subset of the model's attributes."""
        return {key: self.get_attribute(key) for key in Arr.variadic(attributes)}

    def set_attribute(self, key: Hashable, value: Any) -> Self:
        """Set a given attribute on the model."""
        if self.has_set_mutator(key):
            self._mutator_for('set', key)(value)
            return self

        self._attributes[key] = value
        return self

    def set_raw_attributes(self, attributes: Dict[Hashable, Any], sync: bool = False) -> Self:
        """Replace the attributes without running mutators or guards."""
        self._attributes = dict(attributes)

        if sync:
            self.sync_original()

        return self

    # 2. Attribute mutation

    @staticmethod
    def mutator_name(prefix: str, key: Hashable) -> str:
        """Build the method name of a mutator, e.g. ``get_first_name_attribute``."""
        return f"{prefix}_{Str.snake(Str.studly(str(key)))}_attribute"

    def _resolve_mutator(self, prefix: str, key: Hashable) -> Optional[str]:
        """Find the mutator method for a key, matching method names case-insensitively."""
        cls = type(self)
        name = self.mutator_name(prefix, key)

        if callable(getattr(cls, name, None)):
            return name

        # FIRST_NAME and firstname both reach get_first_name_attribute
        wanted = Str.studly(str(key)).lower()
        head, tail = f"{prefix}_", '_attribute'

        for candidate in dir(cls):
            if not (candidate.startswith(head) and candidate.endswith(tail)):
                continue

            middle = candidate[len(head):-len(tail)]

            if middle and Str.studly(middle).lower() == wanted and callable(getattr(cls, candidate)):
                return candidate

        return None

    def _mutator_for(self, prefix: str, key: Hashable) -> Callable[[Any], Any]:
        name = self._resolve_mutator(prefix, key)

        if name is None:
            raise AttributeError(f"'{type(self).__name__}' has no {prefix} mutator for [{key}]")

        return getattr(self, name)  # type: ignore[no-any-return]

    def has_get_mutator(self, key: Hashable) -> bool:
        """Determine if a get mutator exists for an attribute."""
        return self._resolve_mutator('get', key) is not None

    def has_set_mutator(self, key: Hashable) -> bool:
        """Determine if a set mutator exists for an attribute."""
        return self._resolve_mutator('set', key) is not None

    def transform_model_value(self, key: Hashable, value: Any) -> Any:
        """Apply the get mutator of the attribute to its raw value, if there is one."""
        if self.has_get_mutator(key):
            return self._mutator_for('get', key)(value)

        return value

    # 3. Change tracking

    def sync_original(self) -> Self:
        """Sync the original attributes with the current."""
        self._original = dict(self._attributes)
        return self

    def sync_original_attribute(self, attribute: Hashable) -> Self:
        """Sync a single original attribute with its current value."""
        return self.sync_original_attributes(attribute)

    def sync_original_attributes(self, *attributes: Any) -> Self:
        """
        Sync multiple original attributes with their current values.

        Raises KeyError if one of the attributes is not currently set.
        """
        current = self._attributes

        for attribute in Arr.variadic(attributes):
            self._original[attribute] = current[attribute]

        return self

    def sync_changes(self) -> Self:
        """Sync the changed attributes with the attributes that are currently dirty."""
        self._changes = self.get_dirty()
        return self

    def get_changes(self) -> Dict[Hashable, Any]:
        """Get the attributes that were changed at the last sync_changes()."""
        return dict(self._changes)

    def get_original(self, key: Optional[Hashable] = None, default: Any = None) -> Any:
        """
        Get the model's original attribute values, with get mutators applied.

        The snapshot is read through a fresh instance so the model itself is
        never rewound.
        """
        instance: HasAttributes = self.new_instance()  # type: ignore[attr-defined]

        return instance.set_raw_attributes(
            self._original,
            sync=True,
        )._get_original_without_rewinding_model(key, default)

    def _get_original_without_rewinding_model(
        self, key: Optional[Hashable] = None, default: Any = None
    ) -> Any:
        if key is not None:
            value = self._original.get(key)
            return self.transform_model_value(key, default if value is None else value)

        return {
            name: self.transform_model_value(name, value)
            for name, value in self._original.items()
        }

    def get_raw_original(self, key: Optional[Hashable] = None, default: Any = None) -> Any:
        """Get the model's original attribute values without any mutation."""
        if key is None:
            return dict(self._original)

        value = self._original.get(key)
        return default if value is None else value

    def original_is_equivalent(self, key: Hashable) -> bool:
        """Determine if the new and old values for a given key are equivalent."""
        if key not in self._original:
            return False

        attribute = self._attributes.get(key)
        original = self._original.get(key)

        if type(attribute) is type(original) and attribute == original:
            return True

        return (
            self._is_numeric(attribute)
            and self._is_numeric(original)
            and self._numeric_string(attribute) == self._numeric_string(original)
        )

    @classmethod
    def _is_numeric(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float, Decimal)):
            return True
        return isinstance(value, str) and cls._numeric_pattern.match(value) is not None

    @staticmethod
    def _numeric_string(value: Any) -> str:
        """Cast a numeric value to text the way loosely typed comparisons do (1.0 -> "1")."""
        # Floats use 14 significant digits, so 0.1 + 0.2 reads as "0.3"
        if isinstance(value, float):
            return '%.14G' % value
        return str(value)

    def get_dirty(self) -> Dict[Hashable, Any]:
        """Get the attributes that have been changed since the last sync."""
        return {
            key: value
            for key, value in self._attributes.items()
            if not self.original_is_equivalent(key)
        }

    def is_clean(self, *attributes: Any) -> bool:
        """Determine if the model or all of the given attribute(s) have remained the same."""
        return not self.is_dirty(*attributes)

    def is_dirty(self, *attributes: Any) -> bool:
        """Determine if the model or any of the given attribute(s) have been modified."""
        return self.has_changes(self.get_dirty(), Arr.variadic(attributes))

    def was_changed(self, *attributes: Any) -> bool:
        """Determine if the model or any of the given attribute(s) were changed at the last sync."""
        return self.has_changes(self.get_changes(), Arr.variadic(attributes))

    def has_changes(
        self, changes: Dict[Hashable, Any], attributes: Optional[Iterable[Hashable]] = None
    ) -> bool:
        """Determine if any of the given attributes are present in the changes."""
        # With no attributes specified, any change at all counts
        keys = Arr.wrap(attributes)

        if not keys:
            return len(changes) > 0

        return any(key in changes for key in keys)

    # 4. Serialization

    def attributes_to_array(self) -> Dict[Hashable, Any]:
        """Convert the model's attributes to a dictionary."""
        return self.get_arrayable_attributes()

    def get_arrayable_attributes(self) -> Dict[Hashable, Any]:
        """Get the attributes that can be serialized."""
        return self.get_arrayable_items(self.get_attributes())  # type: ignore[attr-defined, no-any-return]
