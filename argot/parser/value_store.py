# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueStore`, the typed storage behind an `ArgumentParser`.

The store keeps two parallel lists indexed by schema position: the current value
of every argument (seeded from the spec defaults) and whether the argument was
supplied on the command line. Values are only written through `set_flag` and
`try_store`, which run every token through `coerce_value` for the slot's declared
`ValueType`.
"""
from copy import deepcopy
from typing import Any

from argot.exceptions import UnknownArgumentError
from argot.logger import logger
from argot.parser.schema import Schema
from argot.parser.utils import coerce_value


class ValueStore:
    """Typed values and provided markers for every argument in a schema."""

    def __init__(self, schema: Schema) -> None:
        self.schema: Schema = schema
        self._values: list[Any] = [deepcopy(spec.default) for spec in schema]
        self._found: list[bool] = [False] * len(schema)

    def _index(self, abbreviation: str) -> int:
        index = self.schema.index_of(abbreviation)
        if index is None:
            raise UnknownArgumentError(f"Unknown argument abbreviation '{abbreviation}'")
        return index

    def has_spec(self, abbreviation: str) -> bool:
        return self.schema.has_abbreviation(abbreviation)

    def get(self, abbreviation: str) -> Any:
        """
        Return the value for `abbreviation`.

        The default is returned when the argument was not supplied.

        Raises:
            UnknownArgumentError: If the abbreviation is not in the schema.
        """
        return self._values[self._index(abbreviation)]

    def was_provided(self, abbreviation: str) -> bool:
        """Whether the argument was supplied on the command line."""
        return self._found[self._index(abbreviation)]

    def set_flag(self, index: int) -> None:
        self._found[index] = True
        self._values[index] = True

    def try_store(self, index: int, raw: str) -> bool:
        """
        Convert `raw` to the slot's declared type and store it.

        The slot is marked as provided before conversion, so a failed conversion
        still reports the argument as provided. The value itself is left untouched
        on failure.

        Returns:
            bool: True if the value was converted and stored.
        """
        spec = self.schema[index]
        self._found[index] = True
        try:
            value = coerce_value(raw, spec.value_type)
        except ValueError as error:
            logger.debug("Cannot store %r in '%s': %s", raw, spec.name, error)
            return False
        self._values[index] = value
        return True

    def first_unseen_optionally_named(self) -> int | None:
        """Return the index of the first optionally-named argument not yet provided."""
        for index, spec in enumerate(self.schema):
            if spec.is_optionally_named and not self._found[index]:
                return index
        return None

    def provided(self) -> list[str]:
        """Return the abbreviations of every supplied argument, in schema order."""
        return [
            spec.abbreviation
            for spec, found in zip(self.schema, self._found)
            if found
        ]

    def as_dict(self) -> dict[str, Any]:
        """Return all values keyed by long name."""
        return {spec.name: value for spec, value in zip(self.schema, self._values)}

    def __repr__(self) -> str:
        return f"ValueStore({self.as_dict()!r})"
