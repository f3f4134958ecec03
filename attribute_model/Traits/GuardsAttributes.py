from __future__ import annotations

import re
from typing import Any, Callable, ClassVar, Dict, Hashable, List, Self, TypeVar

from attribute_model.Support.Arr import Arr
from attribute_model.Utils.Logger import logger

R = TypeVar('R')


class GuardsAttributes:
    """
    Laravel-style mass-assignment protection for models.

    Fillable keys are the only ones accepted by a mass assignment when the
    fillable list is non-empty. Otherwise every key is accepted except those
    matching the guarded list (``['*']`` guards everything).

    The unguarded switch is shared by every model class. It lives on this
    mixin rather than on subclasses, so ``User.unguard()`` also unguards
    ``Post``.
    """

    __fillable__: ClassVar[List[str]] = []
    __guarded__: ClassVar[List[str]] = []

    _unguarded: ClassVar[bool] = False

    _fillable: List[str]
    _guarded: List[str]

    def __init__(self) -> None:
        # Instance copies, so guard() and fillable() never touch the class defaults
        self._fillable = list(type(self).__fillable__)
        self._guarded = list(type(self).__guarded__)
        super().__init__()

    def get_fillable(self) -> List[str]:
        """Get the fillable attributes for the model."""
        return self._fillable

    def fillable(self, fillable: List[str]) -> Self:
        """Set the fillable attributes for the model."""
        self._fillable = list(fillable)
        return self

    def merge_fillable(self, fillable: List[str]) -> Self:
        """Merge new fillable attributes with the existing fillable attributes on the model."""
        self._fillable = self._fillable + list(fillable)
        return self

    def get_guarded(self) -> List[str]:
        """Get the guarded attributes for the model."""
        return self._guarded

    def guard(self, guarded: List[str]) -> Self:
        """Set the guarded attributes for the model."""
        self._guarded = list(guarded)
        return self

    def merge_guarded(self, guarded: List[str]) -> Self:
        """Merge new guarded attributes with the existing guarded attributes on the model."""
        self._guarded = self._guarded + list(guarded)
        return self

    @classmethod
    def unguard(cls, state: bool = True) -> None:
        """Disable all mass-assignment restrictions."""
        GuardsAttributes._unguarded = state
        logger.debug("Mass assignment guard toggled", {'unguarded': state, 'by': cls.__name__})

    @classmethod
    def reguard(cls) -> None:
        """Enable all mass-assignment restrictions."""
        GuardsAttributes._unguarded = False
        logger.debug("Mass assignment guard restored", {'by': cls.__name__})

    @classmethod
    def is_unguarded(cls) -> bool:
        """Determine if mass assignment is "unguarded"."""
        return GuardsAttributes._unguarded

    @classmethod
    def unguarded(cls, callback: Callable[[], R]) -> R:
        """Run the given callable while being unguarded."""
        if GuardsAttributes._unguarded:
            return callback()

        cls.unguard()

        try:
            return callback()
        finally:
            cls.reguard()

    def is_fillable(self, key: Hashable) -> bool:
        """Determine whether or not the attribute is fillable."""
        if GuardsAttributes._unguarded:
            return True

        if key in self.get_fillable():
            return True

        if self.is_guarded(key):
            return False

        name = str(key)

        return (
            not self.get_fillable()
            and '.' not in name
            and not name.startswith('_')
        )

    def is_guarded(self, key: Hashable) -> bool:
        """Determine if the given key is guarded."""
        guarded = self.get_guarded()

        if not guarded:
            return False

        if guarded == ['*']:
            return True

        pattern = re.compile('^' + re.escape(str(key)) + '$', re.IGNORECASE)
        return any(pattern.search(str(entry)) for entry in guarded)

    def totally_guarded(self) -> bool:
        """Determine if the model is totally guarded, meaning every attribute is guarded."""
        return len(self.get_fillable()) == 0 and self.get_guarded() == ['*']

    def fillable_from_array(self, attributes: Dict[Hashable, Any]) -> Dict[Hashable, Any]:
        """Get the fillable attributes from an array."""
        if len(self.get_fillable()) > 0 and not GuardsAttributes._unguarded:
            return Arr.only(attributes, self.get_fillable())

        return attributes
