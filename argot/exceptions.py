# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argot.

Parsing itself never raises to the caller: the outcome of `ArgumentParser.parse()`
is recorded as a `ParseResult`. Exceptions cover the surrounding surfaces where a
caller asks for a hard failure instead, such as building an invalid schema or
reading a value under an abbreviation the schema does not know.

All exceptions inherit from `ArgotError`, the base exception for the package.

Exception Hierarchy:
- ArgotError
    ├── SchemaError
    ├── UnknownArgumentError
    ├── ArgumentParseError
    └── ConfigError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argot.parser.parse_result import ParseResult


class ArgotError(Exception):
    """Base exception for Argot."""


class SchemaError(ArgotError):
    """Exception raised when an argument schema is built with invalid specs."""


class UnknownArgumentError(ArgotError, KeyError):
    """Exception raised when a value is requested for an abbreviation not in the schema."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class ArgumentParseError(ArgotError):
    """Exception raised when an argument vector cannot be parsed.

    Carries the `ParseResult` describing the failure.
    """

    def __init__(self, result: ParseResult):
        super().__init__(result.message)
        self.result = result


class ConfigError(ArgotError):
    """Exception raised when a schema configuration file cannot be loaded."""
