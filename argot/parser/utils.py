# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Argot argument parsing.

This module converts the textual tokens found on the command line into the Python
values declared by an argument's `ValueType`. Every store into a parser's value
store goes through `coerce_value`, so a failed conversion is reported in exactly
one way: a `ValueError`.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_datetime: Convert a string to a datetime.
- coerce_value: Convert a string to the Python value for a `ValueType`.
"""
import re
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from argot.parser.parser_types import ValueType

TRUTHY = frozenset({"true", "t", "1", "yes", "on"})
FALSY = frozenset({"false", "f", "0", "no", "off"})
DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognized boolean representation.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    elif normalized in FALSY:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_datetime(value: str) -> datetime:
    """Convert a string to a datetime using `dateutil`'s lenient parser."""
    if isinstance(value, datetime):
        return value
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error


def coerce_value(value: str, value_type: ValueType) -> Any:
    """
    Attempt to convert a string to the given value type.

    Args:
        value (str): The input string to convert.
        value_type (ValueType): The declared type of the target slot.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    if value_type is ValueType.STRING:
        return value
    if value_type is ValueType.BOOL:
        return coerce_bool(value)
    if value_type is ValueType.INTEGER:
        if not isinstance(value, str) or not DECIMAL_INTEGER.fullmatch(value):
            raise ValueError(f"Value '{value}' is not a valid integer")
        return int(value, 10)
    if value_type is ValueType.FLOAT:
        try:
            return float(value)
        except (TypeError, ValueError) as error:
            raise ValueError(f"Value '{value}' is not a valid float") from error
    if value_type is ValueType.DATETIME:
        return coerce_datetime(value)
    raise ValueError(f"Unsupported value type: {value_type!r}")
