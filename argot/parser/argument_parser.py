# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the runtime parsing engine of Argot.

The parser walks the argument vector character by character through an
`ArgumentCursor`, classifies each token with a small state machine, consults its
`Schema`, and writes converted values into its `ValueStore`. The first violation
halts parsing and is recorded as a `ParseResult`; parsing never raises to the
caller unless asked to (`raise_for_result()`, `parse_args()`).

Accepted Syntax:
- `-f` / `-fgo value` / `-fgovalue`: clustered abbreviations. Flags are set in
  turn; the first parameter in the cluster takes the rest of the token, or the
  whole next token, as its value.
- `--name`: sets a flag, or takes the whole next token as the value.
- `--name=value`: inline value; not allowed on flags.
- `--`: every following token is positional, even when it starts with a dash.
- `-`: a literal positional value.
- Any other token fills the next optionally-named parameter not yet supplied.

Public Interface:
- `parse(argv)`: Parse once; returns the `ParseResult`.
- `get(abbreviation)` / `was_provided(abbreviation)`: Read values.
- `parse_args(argv)`: Parse and return values keyed by long name, or raise.
- `render_help()`: Render a rich-styled help listing.

Example Usage:
    parser = create_parser().flag("t", "test").named("o", "output", default="-").create()
    parser.parse(["prog", "-to", "out.txt"])
    if parser:
        parser.get("o")  # "out.txt"
"""
from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argot.console import console
from argot.exceptions import ArgumentParseError
from argot.logger import logger
from argot.parser.argument_kind import ArgumentKind
from argot.parser.cursor import ArgumentCursor
from argot.parser.parse_result import (
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
from argot.parser.schema import HELP_ABBREVIATION, Schema
from argot.parser.value_store import ValueStore
from argot.utils import get_program_invocation


class ParserState(Enum):
    """Where the parser is inside the current token."""

    NONE = "none"
    SINGLE_DASH_CLUSTER = "single_dash_cluster"
    DOUBLE_DASH_ARGUMENT = "double_dash_argument"
    AFTER_FREESTANDING_SEPARATOR = "after_freestanding_separator"


class ArgumentParser:
    """
    Parses an argument vector against a fixed `Schema`.

    A parser parses exactly once. Build a new parser to parse another vector.

    Attributes:
        schema (Schema): The recognized arguments.
        console (Console): Console used by the render methods.
    """

    def __init__(self, schema: Schema, console: Console = console) -> None:
        self.schema: Schema = schema
        self.console: Console = console
        self._values: ValueStore = ValueStore(schema)
        self._result: ParseResult = NotYetParsed()

    @property
    def result(self) -> ParseResult:
        return self._result

    def is_ok(self) -> bool:
        return self._result.is_ok()

    def __bool__(self) -> bool:
        return self.is_ok()

    def result_is(self, result_type: type[ParseResult]) -> bool:
        """Check whether the current result is of the given variant."""
        return isinstance(self._result, result_type)

    def parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector.

        Args:
            argv (Sequence[str] | None): The full argument vector, program name
                first. Defaults to `sys.argv`.

        Returns:
            ParseResult: `Okay`, or the variant describing the first violation.
        """
        if not isinstance(self._result, NotYetParsed):
            logger.debug("Parser already finished with %s", self._result)
            self._result = CannotParseAgain()
            return self._result

        if argv is None:
            argv = sys.argv
        logger.debug("Parsing %d argument(s): %s", max(len(argv) - 1, 0), argv[1:])

        cursor = ArgumentCursor(argv)
        try:
            self._run(cursor)
        except ArgumentParseError as error:
            logger.debug("Parse failed at %s: %s", cursor.position, error.result)
            self._result = error.result
        else:
            logger.debug("Parsed; provided: %s", self._values.provided())
            self._result = Okay()
        return self._result

    def _run(self, cursor: ArgumentCursor) -> None:
        state = ParserState.NONE
        while not cursor.eof():
            if state is ParserState.NONE:
                state = self._handle_none(cursor)
            elif state is ParserState.SINGLE_DASH_CLUSTER:
                state = self._handle_single_dash_cluster(cursor)
            elif state is ParserState.DOUBLE_DASH_ARGUMENT:
                state = self._handle_double_dash_argument(cursor)
            else:
                self._handle_unnamed_argument(cursor)

    def _handle_none(self, cursor: ArgumentCursor) -> ParserState:
        if cursor.at_separator():
            cursor.advance()
            return ParserState.NONE
        if cursor.current() != "-":
            self._handle_unnamed_argument(cursor)
            return ParserState.NONE
        if cursor.peek_is_separator():
            # lone dash is a value
            self._handle_unnamed_argument(cursor)
            return ParserState.NONE
        cursor.advance()
        if cursor.current() != "-":
            return ParserState.SINGLE_DASH_CLUSTER
        if cursor.peek_is_separator():
            cursor.next_arg()
            return ParserState.AFTER_FREESTANDING_SEPARATOR
        cursor.advance()
        return ParserState.DOUBLE_DASH_ARGUMENT

    def _handle_unnamed_argument(self, cursor: ArgumentCursor) -> None:
        index = self._values.first_unseen_optionally_named()
        if index is None:
            raise ArgumentParseError(ExcessUnnamedArguments())
        self._store(index, cursor.arg_tail())
        cursor.next_arg()

    def _handle_single_dash_cluster(self, cursor: ArgumentCursor) -> ParserState:
        if cursor.at_separator():
            cursor.advance()
            return ParserState.NONE

        abbreviation = cursor.current()
        index = self.schema.index_of(abbreviation)
        if index is None:
            raise ArgumentParseError(UnknownOption(abbreviation))

        if self.schema[index].is_flag:
            self._values.set_flag(index)
            cursor.advance()
            return ParserState.SINGLE_DASH_CLUSTER

        cursor.advance()
        value = cursor.arg_tail()
        if not value:
            cursor.next_arg()
            if cursor.eof():
                raise ArgumentParseError(MissingArgument(abbreviation))
            value = cursor.arg_tail()
        self._store(index, value)
        cursor.next_arg()
        return ParserState.NONE

    def _handle_double_dash_argument(self, cursor: ArgumentCursor) -> ParserState:
        name, equals, value = cursor.arg_tail().partition("=")
        index = self.schema.index_of_name(name)
        if index is None:
            raise ArgumentParseError(UnknownOption(name))
        spec = self.schema[index]

        if equals:
            if spec.is_flag:
                raise ArgumentParseError(CannotSetValueOfFlag(name))
            if not value:
                raise ArgumentParseError(MissingArgument())
            self._store(index, value)
        elif spec.is_flag:
            self._values.set_flag(index)
        else:
            cursor.next_arg()
            if cursor.eof():
                raise ArgumentParseError(MissingArgument())
            self._store(index, cursor.arg_tail())
        cursor.next_arg()
        return ParserState.NONE

    def _store(self, index: int, raw: str) -> None:
        if not self._values.try_store(index, raw):
            spec = self.schema[index]
            raise ArgumentParseError(
                ArgumentTypeMismatch(
                    abbreviation=spec.abbreviation,
                    value=raw,
                    expected=spec.value_type,
                )
            )

    def raise_for_result(self) -> None:
        """
        Raise `ArgumentParseError` unless the parser finished with `Okay`.

        Raises:
            ArgumentParseError: Carrying the current result.
        """
        if not self.is_ok():
            raise ArgumentParseError(self._result)

    def parse_args(self, argv: Sequence[str] | None = None) -> dict[str, Any]:
        """
        Parse arguments into a dictionary of values keyed by long name.

        Args:
            argv (Sequence[str] | None): The full argument vector, program name
                first. Defaults to `sys.argv`.

        Returns:
            dict[str, Any]: Every argument's value, defaults included.

        Raises:
            ArgumentParseError: If parsing fails.
        """
        self.parse(argv)
        self.raise_for_result()
        return self.as_dict()

    def get(self, abbreviation: str) -> Any:
        """Return the value for `abbreviation`, or its default if not supplied."""
        return self._values.get(abbreviation)

    def was_provided(self, abbreviation: str) -> bool:
        """Whether the argument was supplied on the command line."""
        return self._values.was_provided(abbreviation)

    def as_dict(self) -> dict[str, Any]:
        """Return every argument's value keyed by long name."""
        return self._values.as_dict()

    @property
    def help_requested(self) -> bool:
        return bool(self._values.get(HELP_ABBREVIATION))

    def has_abbreviation(self, abbreviation: str) -> bool:
        return self.schema.has_abbreviation(abbreviation)

    def get_abbreviation_of_name(self, name: str) -> str | None:
        return self.schema.abbreviation_of_name(name)

    def get_name(self, abbreviation: str) -> str | None:
        spec = self.schema.get(abbreviation)
        return None if spec is None else spec.name

    def index_of(self, abbreviation: str) -> int | None:
        return self.schema.index_of(abbreviation)

    def is_flag(self, abbreviation: str) -> bool:
        return self.schema.is_kind(abbreviation, ArgumentKind.FLAG)

    def is_named_parameter(self, abbreviation: str) -> bool:
        return self.schema.is_kind(abbreviation, ArgumentKind.NAMED)

    def is_optionally_named_parameter(self, abbreviation: str) -> bool:
        return self.schema.is_kind(abbreviation, ArgumentKind.OPTIONALLY_NAMED)

    def get_usage(self, plain_text: bool = False) -> str:
        """
        Render the usage string for this parser.

        Returns:
            str: A usage line showing syntax and argument structure.
        """
        program = self.schema.program or get_program_invocation()
        options = " ".join(spec.get_usage_text() for spec in self.schema)
        usage = f"{program} {options}" if options else program
        if plain_text:
            return usage
        return escape(usage)

    def render_help(self) -> None:
        """
        Print formatted help text for this parser using Rich output.

        Each argument gets one line: its flags, its value placeholder, its
        description and, for parameters, its default.
        """
        self.console.print(f"[bold]usage: {self.get_usage()}[/bold]\n")

        if self.schema.help_text:
            self.console.print(escape(self.schema.help_text) + "\n")

        flag_texts = [
            f"{spec.get_flag_text()} {spec.get_metavar()}".rstrip()
            for spec in self.schema
        ]
        width = max((len(text) for text in flag_texts), default=0)
        self.console.print("[bold]options:[/bold]")
        for spec, flags in zip(self.schema, flag_texts):
            arg_line = f"  [argot.flag]{escape(spec.get_flag_text())}[/argot.flag]"
            metavar = spec.get_metavar()
            if metavar:
                arg_line += f" [argot.metavar]{escape(metavar)}[/argot.metavar]"
            arg_line += " " * (width - len(flags))
            help_text = escape(spec.description)
            default = spec.get_default_text()
            if default:
                help_text += f" [argot.default](default: {escape(default)})[/argot.default]"
            self.console.print(f"{arg_line}  {help_text}".rstrip())

    def render_values(self) -> None:
        """Print a table of every argument's value and whether it was supplied."""
        table = Table(box=box.SIMPLE, show_header=True)
        table.add_column("Option", style="argot.flag")
        table.add_column("Value")
        table.add_column("Provided", justify="center")
        for spec in self.schema:
            value = self._values.get(spec.abbreviation)
            provided = self._values.was_provided(spec.abbreviation)
            table.add_row(
                escape(spec.get_flag_text()),
                escape(repr(value)),
                "[argot.ok]✔[/]" if provided else "",
            )
        self.console.print(table)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        return f"ArgumentParser(schema={self.schema}, result={self._result})"

    def __repr__(self) -> str:
        return str(self)
