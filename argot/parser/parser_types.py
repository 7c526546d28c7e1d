# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value type tags for Argot's argument parser.

Every slot in a parser's value store is tagged with a `ValueType`. The tag decides
how a textual token from the command line is converted (see `argot.parser.utils`)
and which Python values are acceptable as defaults. New value kinds are added by
adding a member here and a branch in `coerce_value`.

Contents:
- `ValueType`: The closed set of supported value kinds.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any


class ValueType(Enum):
    """
    The value kinds an argument can hold.

    Members:
        BOOL: `True` / `False`. Flags are always BOOL.
        STRING: The token text, unchanged.
        INTEGER: A decimal integer.
        FLOAT: A floating point number.
        DATETIME: A date or timestamp, parsed with `dateutil`.

    Aliases:
        - "boolean" → "bool"
        - "string" / "text" → "str"
        - "integer" → "int"
        - "double" → "float"
        - "date" / "timestamp" → "datetime"
    """

    BOOL = "bool"
    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    DATETIME = "datetime"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "string": "str",
            "text": "str",
            "integer": "int",
            "double": "float",
            "date": "datetime",
            "timestamp": "datetime",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def python_type(self) -> type:
        """The Python type stored in slots of this kind."""
        return {
            ValueType.BOOL: bool,
            ValueType.STRING: str,
            ValueType.INTEGER: int,
            ValueType.FLOAT: float,
            ValueType.DATETIME: datetime,
        }[self]

    @classmethod
    def infer(cls, default: Any) -> ValueType:
        """
        Infer the value type from a default value.

        Args:
            default (Any): The default value of an argument, or None.

        Returns:
            ValueType: The matching tag. STRING when `default` is None.

        Raises:
            ValueError: If the default's type has no matching tag.
        """
        if default is None:
            return cls.STRING
        # bool before int: bool is a subclass of int
        for member in (cls.BOOL, cls.INTEGER, cls.FLOAT, cls.STRING, cls.DATETIME):
            if isinstance(default, member.python_type):
                return member
        raise ValueError(
            f"Cannot infer a value type from default {default!r} "
            f"of type {type(default).__name__}"
        )

    def accepts(self, value: Any) -> bool:
        """Check whether `value` can be stored in a slot of this kind."""
        if self is ValueType.INTEGER and isinstance(value, bool):
            return False
        if self is ValueType.FLOAT and isinstance(value, int) and not isinstance(
            value, bool
        ):
            return True
        return isinstance(value, self.python_type)

    def __str__(self) -> str:
        return self.value
