from __future__ import annotations

import re
from typing import ClassVar, Dict, Tuple


class Str:
    """Laravel-style string helper class."""

    # Results are cached for the lifetime of the process
    _studly_cache: ClassVar[Dict[str, str]] = {}
    _snake_cache: ClassVar[Dict[Tuple[str, str], str]] = {}

    # ucwords() treats any of these as a word boundary
    _word_boundaries: ClassVar[str] = ' \t\r\n\f\v'

    @staticmethod
    def ucwords(value: str) -> str:
        """Uppercase the first character of each word in a string."""
        chars = list(value)
        for index, char in enumerate(chars):
            if index == 0 or chars[index - 1] in Str._word_boundaries:
                chars[index] = char.upper()
        return ''.join(chars)

    @staticmethod
    def studly(value: str) -> str:
        """Convert a value to studly caps case."""
        key = value

        if key in Str._studly_cache:
            return Str._studly_cache[key]

        value = Str.ucwords(value.replace('-', ' ').replace('_', ' '))

        Str._studly_cache[key] = value.replace(' ', '')
        return Str._studly_cache[key]

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """Convert a string to snake case."""
        key = (value, delimiter)

        if key in Str._snake_cache:
            return Str._snake_cache[key]

        if not value.islower():
            value = re.sub(r'\s+', '', Str.ucwords(value))
            # Insert delimiter before every uppercase letter that follows a character
            value = re.sub(r'(.)(?=[A-Z])', rf'\1{delimiter}', value).lower()

        Str._snake_cache[key] = value
        return value

    @staticmethod
    def flush_cache() -> None:
        """Forget every cached conversion."""
        Str._studly_cache.clear()
        Str._snake_cache.clear()
