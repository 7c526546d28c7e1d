# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass used by `ArgumentParser` to describe one
recognized command-line argument.

Each spec is immutable and identifies its argument twice: by a single-character
abbreviation (`-o`) and by a long name (`--output`). Values are always read back
by abbreviation.

Specs should be created through `SchemaBuilder` (see `argot.parser.schema`),
which validates uniqueness across the whole schema.

Key Attributes:
- `abbreviation`: Single printable character used after a single dash
- `name`: Long name used after a double dash
- `kind`: `ArgumentKind` describing flag / named / optionally-named behavior
- `value_type`: `ValueType` tag deciding how tokens are converted
- `default`: Value reported when the argument is not supplied
"""
from dataclasses import dataclass
from typing import Any

from argot.parser.argument_kind import ArgumentKind
from argot.parser.parser_types import ValueType


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Represents a command-line argument.

    Attributes:
        abbreviation (str): Single-character short form, used as `-x`.
        name (str): Long form, used as `--name`.
        description (str): Help text for the argument.
        kind (ArgumentKind): How the argument is recognized.
        value_type (ValueType): The type of the value the argument holds.
        default (Any): The value if the argument is not provided.
    """

    abbreviation: str
    name: str
    description: str = ""
    kind: ArgumentKind = ArgumentKind.FLAG
    value_type: ValueType = ValueType.BOOL
    default: Any = False

    @property
    def is_flag(self) -> bool:
        return self.kind is ArgumentKind.FLAG

    @property
    def is_named(self) -> bool:
        return self.kind is ArgumentKind.NAMED

    @property
    def is_optionally_named(self) -> bool:
        return self.kind is ArgumentKind.OPTIONALLY_NAMED

    def get_flag_text(self) -> str:
        """Get the flag text for the argument, e.g. `-o, --output`."""
        return f"-{self.abbreviation}, --{self.name}"

    def get_metavar(self) -> str:
        """Get the placeholder shown for the argument's value."""
        if not self.kind.takes_value:
            return ""
        return self.name.upper().replace("-", "_")

    def get_usage_text(self) -> str:
        """Get the usage fragment for the argument."""
        if self.is_flag:
            return f"[-{self.abbreviation}]"
        if self.is_optionally_named:
            return f"[{self.name}]"
        return f"[-{self.abbreviation} {self.get_metavar()}]"

    def get_default_text(self) -> str:
        """Get the rendered default value, or an empty string for flags and None."""
        if self.is_flag or self.default is None:
            return ""
        if self.value_type is ValueType.STRING:
            return f"'{self.default}'"
        return str(self.default)
