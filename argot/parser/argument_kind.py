# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, an enum describing how an argument is recognized on the
command line.

Supports alias coercion for shorthand or config-friendly values, so schema files
can say `positional` instead of `optionally_named`.

Exports:
    - ArgumentKind: Enum of allowed argument kinds.

Example:
    ArgumentKind("flag")        → ArgumentKind.FLAG
    ArgumentKind("option")      → ArgumentKind.NAMED (via alias)
    ArgumentKind("positional")  → ArgumentKind.OPTIONALLY_NAMED (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """
    Defines how an argument is recognized on the command line.

    Members:
        FLAG: A boolean switch (`-v`, `--verbose`). Takes no value.
        NAMED: A value parameter that must be introduced by its abbreviation
            or name (`-o out.txt`, `--output=out.txt`).
        OPTIONALLY_NAMED: A value parameter that may be introduced by name, or
            filled positionally by a bare token in declaration order.

    Aliases:
        - "switch" → "flag"
        - "option" → "named"
        - "positional" → "optionally_named"
    """

    FLAG = "flag"
    NAMED = "named"
    OPTIONALLY_NAMED = "optionally_named"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "switch": "flag",
            "option": "named",
            "positional": "optionally_named",
            "optionally-named": "optionally_named",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether arguments of this kind consume a value token."""
        return self is not ArgumentKind.FLAG

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
