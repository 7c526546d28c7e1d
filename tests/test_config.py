from datetime import datetime

import pytest

from argot.config import load_schema
from argot.exceptions import ConfigError
from argot.parser import ArgumentKind, ArgumentParser, ValueType, create_parser

YAML_SCHEMA = """\
help: Compile a source file.
program: compile
arguments:
  - abbreviation: t
    name: test
    kind: flag
    description: Run tests after compiling
  - abbreviation: o
    name: output
    kind: named
    default: a.out
  - abbreviation: j
    name: jobs
    type: integer
    default: "4"
  - abbreviation: i
    name: input
    kind: positional
    default: "-"
"""

TOML_SCHEMA = """\
help = "Compile a source file."
program = "compile"

[[arguments]]
abbreviation = "t"
name = "test"
kind = "flag"
description = "Run tests after compiling"

[[arguments]]
abbreviation = "o"
name = "output"
kind = "named"
default = "a.out"

[[arguments]]
abbreviation = "j"
name = "jobs"
type = "int"
default = 4

[[arguments]]
abbreviation = "i"
name = "input"
kind = "optionally_named"
default = "-"
"""


def builder_schema():
    return (
        create_parser("Compile a source file.", program="compile")
        .flag("t", "test", "Run tests after compiling")
        .named("o", "output", default="a.out")
        .named("j", "jobs", default=4)
        .optionally_named("i", "input", default="-")
        .build()
    )


@pytest.mark.parametrize(
    "filename, content",
    [
        ("schema.yaml", YAML_SCHEMA),
        ("schema.yml", YAML_SCHEMA),
        ("schema.toml", TOML_SCHEMA),
    ],
)
def test_load_schema_matches_builder(tmp_path, filename, content):
    path = tmp_path / filename
    path.write_text(content, encoding="UTF-8")

    schema = load_schema(path)

    assert schema == builder_schema()
    assert schema.program == "compile"
    assert schema[3].value_type is ValueType.INTEGER
    assert schema[4].kind is ArgumentKind.OPTIONALLY_NAMED


def test_loaded_schema_parses_like_builder(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(YAML_SCHEMA, encoding="UTF-8")
    argv = ["compile", "-tj8", "--output=build/out", "main.src"]

    loaded = ArgumentParser(load_schema(str(path)))
    built = ArgumentParser(builder_schema())

    assert loaded.parse(argv) == built.parse(argv)
    assert loaded.as_dict() == built.as_dict() == {
        "help": False,
        "test": True,
        "output": "build/out",
        "jobs": 8,
        "input": "main.src",
    }


def test_datetime_default_from_text(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text(
        '[[arguments]]\nabbreviation = "s"\nname = "since"\ntype = "datetime"\n'
        'default = "2024-01-02"\n',
        encoding="UTF-8",
    )

    schema = load_schema(path)

    assert schema[1].default == datetime(2024, 1, 2)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="No such config file"):
        load_schema(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(ConfigError, match="Unsupported config format"):
        load_schema(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="must contain a dictionary"):
        load_schema(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("arguments: [unclosed\n", encoding="UTF-8")
    with pytest.raises(ConfigError, match="Could not parse"):
        load_schema(path)


def test_invalid_kind(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "arguments:\n  - {abbreviation: x, name: extra, kind: repeated}\n",
        encoding="UTF-8",
    )
    with pytest.raises(ConfigError, match="Invalid schema config"):
        load_schema(path)


def test_missing_name(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("arguments:\n  - {abbreviation: x}\n", encoding="UTF-8")
    with pytest.raises(ConfigError):
        load_schema(path)


def test_duplicate_abbreviation(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "arguments:\n"
        "  - {abbreviation: x, name: extra, kind: flag}\n"
        "  - {abbreviation: x, name: other, kind: flag}\n",
        encoding="UTF-8",
    )
    with pytest.raises(ConfigError, match="already used"):
        load_schema(path)


def test_reserved_help(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "arguments:\n  - {abbreviation: h, name: host}\n", encoding="UTF-8"
    )
    with pytest.raises(ConfigError, match="reserved"):
        load_schema(path)


def test_bad_text_default(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "arguments:\n  - {abbreviation: n, name: count, type: int, default: many}\n",
        encoding="UTF-8",
    )
    with pytest.raises(ConfigError, match="many"):
        load_schema(path)


def test_file_path_type():
    with pytest.raises(TypeError):
        load_schema(42)
