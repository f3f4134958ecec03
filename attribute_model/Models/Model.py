from __future__ import annotations

import json
from enum import IntFlag
from typing import Any, Dict, Hashable, Optional, Self, Union

from attribute_model.Exceptions import MassAssignmentException
from attribute_model.Traits.GuardsAttributes import GuardsAttributes
from attribute_model.Traits.HasAttributes import HasAttributes
from attribute_model.Traits.HidesAttributes import HidesAttributes
from attribute_model.Utils.Logger import logger
from attribute_model.config import settings


class JsonOption(IntFlag):
    """Flags accepted by Model.to_json()."""
    UNESCAPED_SLASHES = 64
    PRETTY_PRINT = 128
    UNESCAPED_UNICODE = 256


class Model(HasAttributes, HidesAttributes, GuardsAttributes):
    """
    Laravel-style model detached from any database.

    Supports mass assignment protection, mutators, change tracking and
    hidden/visible serialization. Attributes are reachable as properties
    (``model.name``) and as items (``model['name']``).

    Usage:
        class User(Model):
            __fillable__ = ['name', 'email']
            __hidden__ = ['password']

            def set_name_attribute(self, value: str) -> None:
                self._attributes['name'] = value.strip()

        user = User({'name': ' Aidan ', 'is_admin': True})
        user.name        # 'Aidan'
        user.is_admin    # None, not fillable
    """

    def __init__(self, attributes: Optional[Dict[Hashable, Any]] = None) -> None:
        super().__init__()
        self.fill(attributes or {})

    def new_instance(self, attributes: Optional[Dict[Hashable, Any]] = None) -> Self:
        """Create a new instance of the current model."""
        return type(self)(attributes or {})

    def fill(self, attributes: Dict[Hashable, Any]) -> Self:
        """Fill the model with an array of attributes while respecting the guarded state."""
        is_totally_guarded = self.totally_guarded()

        for key, value in self.fillable_from_array(attributes).items():
            # Only fillable keys are mass assignable, everything else is
            # dropped, unless the model refuses mass assignment entirely
            if self.is_fillable(key):
                self.set_attribute(key, value)
            elif is_totally_guarded:
                exception = MassAssignmentException(key, type(self))
                logger.warning(str(exception))
                raise exception
            else:
                logger.debug("Discarded guarded attribute", {'key': str(key), 'model': type(self).__name__})

        return self

    def force_fill(self, attributes: Dict[Hashable, Any]) -> Self:
        """Fill the model with an array of attributes while bypassing the guarded state."""
        return self.unguarded(lambda: self.fill(attributes))

    def isset(self, key: Hashable) -> bool:
        """Determine if an attribute is set and is not None."""
        return self.get_attribute(key) is not None

    def unset(self, key: Hashable) -> None:
        """Remove an attribute, bypassing mutators."""
        self._attributes.pop(key, None)

    # Dynamic property access

    def __getattr__(self, key: str) -> Any:
        # Only reached when normal lookup fails
        if key.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{key}'")
        return self.get_attribute(key)

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith('_'):
            object.__setattr__(self, key, value)
        else:
            self.set_attribute(key, value)

    def __delattr__(self, key: str) -> None:
        if key.startswith('_'):
            object.__delattr__(self, key)
        else:
            self.unset(key)

    # Indexed access

    def __getitem__(self, key: Hashable) -> Any:
        return self.get_attribute(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.set_attribute(key, value)

    def __delitem__(self, key: Hashable) -> None:
        self.unset(key)

    def __contains__(self, key: Hashable) -> bool:
        return self.isset(key)

    # Serialization

    def to_array(self) -> Dict[Hashable, Any]:
        """Get the model's values as a dictionary."""
        return self.attributes_to_array()

    def json_serialize(self) -> Dict[Hashable, Any]:
        """Get the data that should be encoded by to_json()."""
        return self.to_array()

    def to_json(self, options: Union[int, JsonOption, None] = None) -> str:
        """Get the model's values as JSON, keeping attribute order."""
        flags = JsonOption(settings.JSON_OPTIONS if options is None else options)

        pretty = bool(flags & JsonOption.PRETTY_PRINT)

        encoded = json.dumps(
            self.json_serialize(),
            indent=4 if pretty else None,
            separators=(',', ': ') if pretty else (',', ':'),
            ensure_ascii=not flags & JsonOption.UNESCAPED_UNICODE,
        )

        if not flags & JsonOption.UNESCAPED_SLASHES:
            encoded = encoded.replace('/', '\\/')

        return encoded

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._attributes!r}>"
