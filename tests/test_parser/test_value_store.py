import pytest

from argot.exceptions import ArgotError, UnknownArgumentError
from argot.parser import ValueStore, create_parser


@pytest.fixture
def store():
    schema = (
        create_parser()
        .flag("v", "verbose")
        .named("n", "count", default=3)
        .optionally_named("i", "input", default="-")
        .optionally_named("o", "output", default="-")
        .build()
    )
    return ValueStore(schema)


def test_defaults(store):
    assert store.get("v") is False
    assert store.get("n") == 3
    assert store.get("i") == "-"
    assert not any(store.was_provided(key) for key in "hvnio")
    assert store.provided() == []


def test_set_flag(store):
    store.set_flag(1)
    assert store.get("v") is True
    assert store.was_provided("v")
    assert store.provided() == ["v"]


def test_try_store_converts(store):
    assert store.try_store(2, "10")
    assert store.get("n") == 10
    assert store.was_provided("n")


def test_try_store_failure_marks_found_and_keeps_value(store):
    assert not store.try_store(2, "ten")
    assert store.get("n") == 3
    assert store.was_provided("n")


def test_first_unseen_optionally_named(store):
    assert store.first_unseen_optionally_named() == 3
    store.try_store(3, "in.txt")
    assert store.first_unseen_optionally_named() == 4
    store.try_store(4, "out.txt")
    assert store.first_unseen_optionally_named() is None


def test_unknown_abbreviation(store):
    assert store.has_spec("n")
    assert not store.has_spec("q")
    with pytest.raises(UnknownArgumentError):
        store.get("q")
    with pytest.raises(KeyError):
        store.was_provided("q")
    with pytest.raises(ArgotError):
        store.get("q")


def test_as_dict(store):
    store.try_store(3, "in.txt")
    assert store.as_dict() == {
        "help": False,
        "verbose": False,
        "count": 3,
        "input": "in.txt",
        "output": "-",
    }


def test_defaults_are_copied():
    schema = create_parser().named("n", "name", default="x").build()
    first = ValueStore(schema)
    second = ValueStore(schema)
    first.try_store(1, "changed")
    assert second.get("n") == "x"
    assert schema[1].default == "x"
