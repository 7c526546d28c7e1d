# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argot argument schemas.

A schema file lists the arguments a parser recognizes, in declaration order:

    help: "Compile a source file."
    program: "compile"
    arguments:
      - abbreviation: t
        name: test
        kind: flag
        description: Run tests after compiling
      - abbreviation: o
        name: output
        kind: named
        default: a.out
      - abbreviation: i
        name: input
        kind: positional
        type: str
        default: "-"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argot.exceptions import ConfigError, SchemaError
from argot.logger import logger
from argot.parser.argument_kind import ArgumentKind
from argot.parser.parser_types import ValueType
from argot.parser.schema import Schema, SchemaBuilder
from argot.parser.utils import coerce_value


class RawArgument(BaseModel):
    """Raw argument model for an Argot schema file."""

    abbreviation: str
    name: str
    description: str = ""
    kind: ArgumentKind = ArgumentKind.NAMED
    type: ValueType | None = None
    default: Any = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType | None:
        if value is None or isinstance(value, ValueType):
            return value
        return ValueType(value)

    def resolve_default(self) -> Any:
        """Return the default, converting text defaults for non-text types."""
        if (
            isinstance(self.default, str)
            and self.type is not None
            and self.type is not ValueType.STRING
        ):
            try:
                return coerce_value(self.default, self.type)
            except ValueError as error:
                raise ConfigError(
                    f"Default value {self.default!r} for '{self.name}': {error}"
                ) from error
        return self.default


class SchemaConfig(BaseModel):
    """Argot schema configuration model."""

    help: str = ""
    program: str | None = None
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_builder(self) -> SchemaBuilder:
        builder = SchemaBuilder(help_text=self.help, program=self.program)
        for argument in self.arguments:
            try:
                builder.add_argument(
                    argument.abbreviation,
                    argument.name,
                    argument.description,
                    argument.kind,
                    argument.resolve_default(),
                    argument.type,
                )
            except SchemaError as error:
                raise ConfigError(f"Invalid argument '{argument.name}': {error}") from error
        return builder

    def to_schema(self) -> Schema:
        return self.to_builder().build()


def read_config(file_path: Path | str) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "help: 'My CLI'\n"
            "arguments:\n"
            "  - abbreviation: 'o'\n"
            "    name: 'output'\n"
            "    kind: 'named'"
        )
    return raw_config


def load_schema(file_path: Path | str) -> Schema:
    """
    Load an argument schema from a YAML or TOML file.

    Each argument should be defined as a dictionary with at least:
    - abbreviation: a unique single-character key
    - name: a unique long name

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Schema: The validated schema, with the help flag registered first.

    Raises:
        ConfigError: If the file is missing, cannot be parsed, or describes an
            invalid schema.
    """
    raw_config = read_config(file_path)
    try:
        config = SchemaConfig.model_validate(raw_config)
    except ValidationError as error:
        logger.error("Invalid schema config '%s': %s", file_path, error)
        raise ConfigError(f"Invalid schema config {file_path}: {error}") from error
    schema = config.to_schema()
    logger.debug("Loaded %s from '%s'", schema, file_path)
    return schema
