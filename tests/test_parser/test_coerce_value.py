from datetime import datetime

import pytest

from argot.parser import ValueType
from argot.parser.utils import coerce_bool, coerce_value


@pytest.mark.parametrize(
    "value, value_type, expected",
    [
        ("42", ValueType.INTEGER, 42),
        ("-7", ValueType.INTEGER, -7),
        ("3.14", ValueType.FLOAT, 3.14),
        ("1e3", ValueType.FLOAT, 1000.0),
        ("True", ValueType.BOOL, True),
        ("off", ValueType.BOOL, False),
        ("hello", ValueType.STRING, "hello"),
        ("", ValueType.STRING, ""),
        ("with space", ValueType.STRING, "with space"),
        ("2024-03-01", ValueType.DATETIME, datetime(2024, 3, 1)),
        ("2024-03-01T12:30:00", ValueType.DATETIME, datetime(2024, 3, 1, 12, 30)),
    ],
)
def test_coerce_value(value, value_type, expected):
    assert coerce_value(value, value_type) == expected


@pytest.mark.parametrize(
    "value, value_type",
    [
        ("abc", ValueType.INTEGER),
        ("4.2", ValueType.INTEGER),
        ("", ValueType.INTEGER),
        ("0x10", ValueType.INTEGER),
        ("1_000", ValueType.INTEGER),
        (" 12", ValueType.INTEGER),
        ("٣", ValueType.INTEGER),
        ("abc", ValueType.FLOAT),
        ("maybe", ValueType.BOOL),
        ("not a date", ValueType.DATETIME),
    ],
)
def test_coerce_value_invalid(value, value_type):
    with pytest.raises(ValueError):
        coerce_value(value, value_type)


@pytest.mark.parametrize("value", ["true", "T", "1", "yes", "YES", " on "])
def test_coerce_bool_truthy(value):
    assert coerce_bool(value) is True


@pytest.mark.parametrize("value", ["false", "F", "0", "no", "No", "OFF"])
def test_coerce_bool_falsy(value):
    assert coerce_bool(value) is False


def test_coerce_bool_passthrough():
    assert coerce_bool(True) is True
    assert coerce_bool(False) is False


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("int", ValueType.INTEGER),
        ("integer", ValueType.INTEGER),
        ("String", ValueType.STRING),
        ("text", ValueType.STRING),
        ("boolean", ValueType.BOOL),
        ("double", ValueType.FLOAT),
        ("date", ValueType.DATETIME),
    ],
)
def test_value_type_aliases(alias, expected):
    assert ValueType(alias) is expected


def test_value_type_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        ValueType("decimal")
    with pytest.raises(ValueError):
        ValueType(3)


def test_value_type_accepts():
    assert ValueType.INTEGER.accepts(3)
    assert not ValueType.INTEGER.accepts(True)
    assert ValueType.FLOAT.accepts(3)
    assert not ValueType.FLOAT.accepts(True)
    assert ValueType.BOOL.accepts(False)
    assert ValueType.DATETIME.accepts(datetime(2024, 1, 1))
    assert not ValueType.STRING.accepts(None)


@pytest.mark.parametrize("value", ["y", "n", "Y", "N"])
def test_coerce_bool_rejects_single_letter_answers(value):
    with pytest.raises(ValueError):
        coerce_bool(value)
