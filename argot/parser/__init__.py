"""
Argot Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec
from .argument_kind import ArgumentKind
from .argument_parser import ArgumentParser, ParserState
from .cursor import ArgumentCursor
from .parse_result import (
    ArgumentTypeMismatch,
    CannotParseAgain,
    CannotSetValueOfFlag,
    ExcessUnnamedArguments,
    MissingArgument,
    NotYetParsed,
    Okay,
    ParseResult,
    UnknownOption,
)
from .parser_types import ValueType
from .schema import Schema, SchemaBuilder, create_parser
from .value_store import ValueStore

__all__ = [
    "ArgumentSpec",
    "ArgumentKind",
    "ArgumentParser",
    "ArgumentCursor",
    "ParserState",
    "ValueType",
    "ValueStore",
    "Schema",
    "SchemaBuilder",
    "create_parser",
    "ParseResult",
    "NotYetParsed",
    "Okay",
    "MissingArgument",
    "UnknownOption",
    "CannotParseAgain",
    "ExcessUnnamedArguments",
    "CannotSetValueOfFlag",
    "ArgumentTypeMismatch",
]
