import pytest

from argot.exceptions import ArgumentParseError
from argot.parser import (
    ArgumentTypeMismatch,
    CannotParseAgain,
    CannotSetValueOfFlag,
    ExcessUnnamedArguments,
    MissingArgument,
    NotYetParsed,
    Okay,
    UnknownOption,
    ValueType,
)


def test_only_okay_is_ok():
    assert Okay().is_ok()
    for result in (
        NotYetParsed(),
        MissingArgument("o"),
        UnknownOption("x"),
        CannotParseAgain(),
        ExcessUnnamedArguments(),
        CannotSetValueOfFlag("verbose"),
        ArgumentTypeMismatch(),
    ):
        assert not result.is_ok()


@pytest.mark.parametrize(
    "result, fragment",
    [
        (MissingArgument("o"), "'-o'"),
        (MissingArgument(), "Missing value"),
        (UnknownOption("frobnicate"), "'frobnicate'"),
        (CannotSetValueOfFlag("verbose"), "'--verbose'"),
        (ExcessUnnamedArguments(), "positional"),
        (CannotParseAgain(), "already been parsed"),
        (
            ArgumentTypeMismatch("n", "ten", ValueType.INTEGER),
            "'ten' for '-n': expected int",
        ),
        (ArgumentTypeMismatch(), "Invalid value"),
    ],
)
def test_messages(result, fragment):
    assert fragment in result.message


def test_results_compare_by_value():
    assert MissingArgument("o") == MissingArgument("o")
    assert MissingArgument("o") != MissingArgument("p")
    assert MissingArgument() != MissingArgument("o")
    assert Okay() != NotYetParsed()


def test_parse_error_carries_result():
    error = ArgumentParseError(UnknownOption("x"))
    assert error.result == UnknownOption("x")
    assert str(error) == UnknownOption("x").message
