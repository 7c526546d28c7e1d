# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the closed set of outcomes an `ArgumentParser` can report.

A parser starts in `NotYetParsed`. A call to `parse()` moves it to `Okay` or to
exactly one error variant, and the first violation found decides which. A second
call to `parse()` moves it to `CannotParseAgain`.

Variants:
- NotYetParsed: Initial state, never a parse outcome.
- Okay: Every token was consumed without violation.
- MissingArgument: A parameter required a value that was not present.
- UnknownOption: A token referenced an abbreviation or name not in the schema.
- CannotParseAgain: `parse()` was called on a parser that already parsed.
- ExcessUnnamedArguments: A positional token had no parameter left to fill.
- CannotSetValueOfFlag: `--flag=value` was used on a flag.
- ArgumentTypeMismatch: A value could not be converted to its declared type.
"""
from dataclasses import dataclass

from argot.parser.parser_types import ValueType


@dataclass(frozen=True)
class ParseResult:
    """Base class for parse outcomes."""

    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class NotYetParsed(ParseResult):
    @property
    def message(self) -> str:
        return "Arguments have not been parsed yet."


@dataclass(frozen=True)
class Okay(ParseResult):
    def is_ok(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return "Arguments parsed successfully."


@dataclass(frozen=True)
class MissingArgument(ParseResult):
    """A parameter required a value. `abbreviation` is None for long-form options."""

    abbreviation: str | None = None

    @property
    def message(self) -> str:
        if self.abbreviation is None:
            return "Missing value for option."
        return f"Missing value for option '-{self.abbreviation}'."


@dataclass(frozen=True)
class UnknownOption(ParseResult):
    """`option` is the abbreviation or long name as written on the command line."""

    option: str

    @property
    def message(self) -> str:
        return (
            f"Unrecognized option '{self.option}'. "
            "Use --help to see available options."
        )


@dataclass(frozen=True)
class CannotParseAgain(ParseResult):
    @property
    def message(self) -> str:
        return "Arguments have already been parsed; create a new parser to parse again."


@dataclass(frozen=True)
class ExcessUnnamedArguments(ParseResult):
    @property
    def message(self) -> str:
        return "Too many positional arguments."


@dataclass(frozen=True)
class CannotSetValueOfFlag(ParseResult):
    option: str

    @property
    def message(self) -> str:
        return f"Flag '--{self.option}' does not take a value."


@dataclass(frozen=True)
class ArgumentTypeMismatch(ParseResult):
    abbreviation: str | None = None
    value: str | None = None
    expected: ValueType | None = None

    @property
    def message(self) -> str:
        if self.abbreviation is None:
            return "Invalid value for option."
        expected = f": expected {self.expected}" if self.expected else ""
        return f"Invalid value {self.value!r} for '-{self.abbreviation}'{expected}."
