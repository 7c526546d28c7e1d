# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Schema`, the ordered and immutable list of `ArgumentSpec` records a parser
recognizes, and `SchemaBuilder`, the chained builder that assembles one.

The builder validates eagerly: every call checks the new spec against the specs
already registered, so an invalid schema fails at the line that introduced the
problem instead of during parsing. A `-h, --help` flag is always registered first;
`h` and `help` are therefore reserved.

Example Usage:
    parser = (
        create_parser("Compile a source file.")
        .flag("t", "test", "Run tests after compiling")
        .named("o", "output", "Output file", default="a.out")
        .optionally_named("i", "input", "Input file", default="-")
        .create()
    )
    parser.parse(["prog", "-to", "build/out", "main.src"])
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator

from argot.exceptions import SchemaError
from argot.logger import logger
from argot.parser.argument import ArgumentSpec
from argot.parser.argument_kind import ArgumentKind
from argot.parser.parser_types import ValueType

if TYPE_CHECKING:
    from argot.parser.argument_parser import ArgumentParser

HELP_ABBREVIATION = "h"
HELP_NAME = "help"


def check_unique(specs: Iterable[ArgumentSpec], spec: ArgumentSpec) -> None:
    """
    Check that `spec` shares neither its abbreviation nor its name with `specs`.

    Raises:
        SchemaError: On the first clash found.
    """
    for existing in specs:
        if existing.abbreviation == spec.abbreviation:
            raise SchemaError(
                f"Abbreviation '{spec.abbreviation}' is already used by "
                f"argument '{existing.name}'"
            )
        if existing.name == spec.name:
            raise SchemaError(f"Argument name '{spec.name}' is already defined")


class Schema:
    """
    Ordered, immutable collection of argument specs with lookup by abbreviation
    and by long name.

    Positions in the schema are stable and index the parser's value store.
    """

    def __init__(
        self,
        specs: tuple[ArgumentSpec, ...],
        help_text: str = "",
        program: str | None = None,
    ) -> None:
        self._specs: tuple[ArgumentSpec, ...] = tuple(specs)
        for index, spec in enumerate(self._specs):
            check_unique(self._specs[:index], spec)
        self.help_text: str = help_text
        self.program: str | None = program
        self._by_abbreviation: dict[str, int] = {
            spec.abbreviation: index for index, spec in enumerate(self._specs)
        }
        self._by_name: dict[str, int] = {
            spec.name: index for index, spec in enumerate(self._specs)
        }

    @property
    def specs(self) -> tuple[ArgumentSpec, ...]:
        return self._specs

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, index: int) -> ArgumentSpec:
        return self._specs[index]

    def has_abbreviation(self, abbreviation: str) -> bool:
        return abbreviation in self._by_abbreviation

    def index_of(self, abbreviation: str) -> int | None:
        """Return the schema position of `abbreviation`, or None if unknown."""
        return self._by_abbreviation.get(abbreviation)

    def index_of_name(self, name: str) -> int | None:
        """Return the schema position of the long `name`, or None if unknown."""
        return self._by_name.get(name)

    def get(self, abbreviation: str) -> ArgumentSpec | None:
        index = self.index_of(abbreviation)
        return None if index is None else self._specs[index]

    def get_by_name(self, name: str) -> ArgumentSpec | None:
        index = self.index_of_name(name)
        return None if index is None else self._specs[index]

    def abbreviation_of_name(self, name: str) -> str | None:
        spec = self.get_by_name(name)
        return None if spec is None else spec.abbreviation

    def is_kind(self, abbreviation: str, kind: ArgumentKind) -> bool:
        spec = self.get(abbreviation)
        return spec is not None and spec.kind is kind

    def max_name_length(self) -> int:
        return max((len(spec.name) for spec in self._specs), default=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return False
        return self._specs == other._specs and self.help_text == other.help_text

    def __hash__(self) -> int:
        return hash((self._specs, self.help_text))

    def __str__(self) -> str:
        flags = sum(spec.is_flag for spec in self._specs)
        named = sum(spec.is_named for spec in self._specs)
        optionally_named = sum(spec.is_optionally_named for spec in self._specs)
        return (
            f"Schema(args={len(self._specs)}, flags={flags}, named={named}, "
            f"optionally_named={optionally_named})"
        )

    def __repr__(self) -> str:
        return str(self)


class SchemaBuilder:
    """
    Chained builder for a `Schema`.

    Every registration method validates the new spec immediately and returns the
    builder, so a schema reads as one expression. `build()` returns the immutable
    `Schema`; `create()` returns a ready `ArgumentParser`.
    """

    def __init__(self, help_text: str = "", program: str | None = None) -> None:
        self._help_text: str = help_text
        self._program: str | None = program
        self._specs: list[ArgumentSpec] = []
        self._add_help()

    def _add_help(self) -> None:
        """Add help flag to the schema."""
        self._register(
            ArgumentSpec(
                abbreviation=HELP_ABBREVIATION,
                name=HELP_NAME,
                description="Show this help message.",
            )
        )

    def help(self, help_text: str) -> SchemaBuilder:
        """Set the text printed above the argument list in help output."""
        self._help_text = help_text
        return self

    def program(self, program: str | None) -> SchemaBuilder:
        """Set the program name shown in usage output."""
        self._program = program
        return self

    def flag(self, abbreviation: str, name: str, description: str = "") -> SchemaBuilder:
        """
        Register a boolean flag.

        Args:
            abbreviation (str): Single-character short form.
            name (str): Long form.
            description (str): Help text.
        """
        self._validate_identity(abbreviation, name)
        self._register(
            ArgumentSpec(
                abbreviation=abbreviation,
                name=name,
                description=description,
                kind=ArgumentKind.FLAG,
                value_type=ValueType.BOOL,
                default=False,
            )
        )
        return self

    def named(
        self,
        abbreviation: str,
        name: str,
        description: str = "",
        default: Any = None,
        value_type: ValueType | str | None = None,
    ) -> SchemaBuilder:
        """
        Register a parameter that must be introduced by abbreviation or name.

        Args:
            abbreviation (str): Single-character short form.
            name (str): Long form.
            description (str): Help text.
            default (Any): Value reported when the parameter is not supplied.
            value_type (ValueType | str | None): Declared type. Inferred from
                `default` when omitted.
        """
        return self.add_argument(
            abbreviation, name, description, ArgumentKind.NAMED, default, value_type
        )

    def optionally_named(
        self,
        abbreviation: str,
        name: str,
        description: str = "",
        default: Any = None,
        value_type: ValueType | str | None = None,
    ) -> SchemaBuilder:
        """
        Register a parameter that may also be filled by a bare positional token.

        Positional tokens fill optionally-named parameters in the order they are
        registered here.
        """
        return self.add_argument(
            abbreviation,
            name,
            description,
            ArgumentKind.OPTIONALLY_NAMED,
            default,
            value_type,
        )

    def add_argument(
        self,
        abbreviation: str,
        name: str,
        description: str = "",
        kind: ArgumentKind | str = ArgumentKind.NAMED,
        default: Any = None,
        value_type: ValueType | str | None = None,
    ) -> SchemaBuilder:
        """
        Register an argument of any kind.

        This is the general form behind `flag()`, `named()` and
        `optionally_named()`, used when the kind is only known at runtime
        (for example when loading a schema file).
        """
        kind = self._validate_kind(kind)
        if kind is ArgumentKind.FLAG:
            if default not in (None, False):
                raise SchemaError(
                    f"Default value cannot be set for flag '{name}'. It is a boolean flag."
                )
            if value_type is not None and self._validate_value_type(
                value_type, default, name
            ) is not ValueType.BOOL:
                raise SchemaError(f"Flag '{name}' must have value type 'bool'")
            return self.flag(abbreviation, name, description)
        self._validate_identity(abbreviation, name)
        resolved_type = self._validate_value_type(value_type, default, name)
        self._validate_default_type(default, resolved_type, name)
        self._register(
            ArgumentSpec(
                abbreviation=abbreviation,
                name=name,
                description=description,
                kind=kind,
                value_type=resolved_type,
                default=default,
            )
        )
        return self

    def _validate_kind(self, kind: ArgumentKind | str) -> ArgumentKind:
        if isinstance(kind, ArgumentKind):
            return kind
        try:
            return ArgumentKind(kind)
        except ValueError as error:
            raise SchemaError(str(error)) from error

    def _validate_value_type(
        self, value_type: ValueType | str | None, default: Any, name: str
    ) -> ValueType:
        if value_type is None:
            try:
                return ValueType.infer(default)
            except ValueError as error:
                raise SchemaError(f"Argument '{name}': {error}") from error
        if isinstance(value_type, ValueType):
            return value_type
        try:
            return ValueType(value_type)
        except ValueError as error:
            raise SchemaError(f"Argument '{name}': {error}") from error

    def _validate_default_type(
        self, default: Any, value_type: ValueType, name: str
    ) -> None:
        """Validate the default value type."""
        if default is None or value_type.accepts(default):
            return
        raise SchemaError(
            f"Default value {default!r} for '{name}' is not a "
            f"{value_type.python_type.__name__}"
        )

    def _validate_identity(self, abbreviation: str, name: str) -> None:
        """Validate the abbreviation and name provided for the argument."""
        if not isinstance(abbreviation, str) or len(abbreviation) != 1:
            raise SchemaError(
                f"Abbreviation {abbreviation!r} must be a single character"
            )
        if not abbreviation.isprintable() or abbreviation.isspace():
            raise SchemaError(f"Abbreviation {abbreviation!r} must be printable")
        if abbreviation == "-":
            raise SchemaError("Abbreviation '-' is not allowed")
        if not isinstance(name, str) or not name:
            raise SchemaError("Argument name must be a non-empty string")
        if name.startswith("-"):
            raise SchemaError(f"Argument name '{name}' must not start with '-'")
        if "=" in name or any(char.isspace() for char in name):
            raise SchemaError(
                f"Argument name '{name}' must not contain '=' or whitespace"
            )
        if abbreviation == HELP_ABBREVIATION:
            raise SchemaError(
                f"'{HELP_ABBREVIATION}' is a reserved argument abbreviation"
            )
        if name == HELP_NAME:
            raise SchemaError(f"'{HELP_NAME}' is a reserved argument name")

    def _register(self, spec: ArgumentSpec) -> None:
        check_unique(self._specs, spec)
        logger.debug(
            "Registered %s argument -%s/--%s", spec.kind, spec.abbreviation, spec.name
        )
        self._specs.append(spec)

    def build(self) -> Schema:
        """Return the immutable schema assembled so far."""
        return Schema(tuple(self._specs), self._help_text, self._program)

    def create(self) -> ArgumentParser:
        """Return a new parser over the schema assembled so far."""
        from argot.parser.argument_parser import ArgumentParser

        return ArgumentParser(self.build())


def create_parser(help_text: str = "", program: str | None = None) -> SchemaBuilder:
    """Start a new schema. Chain registrations and finish with `create()`."""
    return SchemaBuilder(help_text=help_text, program=program)
