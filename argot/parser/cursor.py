# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentCursor`, a character-level reader over an argument vector.

The cursor presents argv as one flattened character stream. The end of each
argument string is a synthetic separator position, reported by `current()` and
`peek()` as a single space. The terminating position of the last argument is the
end of the stream. Slot 0 of argv (the program name) is never visited.

Positions are `(argument_index, char_offset)` pairs. The cursor holds no parsing
state of its own; the parser decides what every character means.
"""
from typing import Sequence

SEPARATOR = " "


class ArgumentCursor:
    """
    Navigates an argument vector character by character.

    Attributes:
        argument_index (int): Index into argv of the current argument string.
        char_offset (int): Offset of the cursor inside that string.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv: tuple[str, ...] = tuple(argv)
        self.argument_index: int = 1
        self.char_offset: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return self.argument_index, self.char_offset

    def _char_at(self, argument_index: int, char_offset: int) -> str:
        if argument_index >= len(self._argv):
            return SEPARATOR
        argument = self._argv[argument_index]
        if char_offset >= len(argument):
            return SEPARATOR
        return argument[char_offset]

    def _next_position(self) -> tuple[int, int] | None:
        argc = len(self._argv)
        if self.argument_index >= argc:
            return None
        if self.char_offset >= len(self._argv[self.argument_index]):
            if self.argument_index >= argc - 1:
                return None
            return self.argument_index + 1, 0
        return self.argument_index, self.char_offset + 1

    def current(self) -> str:
        """Return the character at the cursor, or a space at an argument's end."""
        return self._char_at(self.argument_index, self.char_offset)

    def peek(self) -> str:
        """Return the character at the next logical position."""
        next_position = self._next_position()
        assert next_position is not None, "peek() called at end of stream"
        return self._char_at(*next_position)

    def consume(self) -> str:
        """Return the current character and advance past it."""
        char = self.current()
        self.advance()
        return char

    def advance(self) -> None:
        """Move to the next logical position. No-op at end of stream."""
        next_position = self._next_position()
        if next_position is None:
            return
        self.argument_index, self.char_offset = next_position

    def next_arg(self) -> None:
        """Jump to the start of the next argument, discarding the rest of this one."""
        self.argument_index += 1
        self.char_offset = 0

    def arg_tail(self) -> str:
        """Return the rest of the current argument from the cursor's offset."""
        if self.argument_index >= len(self._argv):
            return ""
        return self._argv[self.argument_index][self.char_offset :]

    def at_separator(self) -> bool:
        """Whether the cursor sits on the synthetic separator after an argument."""
        if self.argument_index >= len(self._argv):
            return True
        return self.char_offset >= len(self._argv[self.argument_index])

    def peek_is_separator(self) -> bool:
        """Whether the next logical position is a synthetic separator."""
        next_position = self._next_position()
        if next_position is None:
            return True
        argument_index, char_offset = next_position
        return char_offset >= len(self._argv[argument_index])

    def eof(self) -> bool:
        """Whether there is no next logical position."""
        return self._next_position() is None

    def __repr__(self) -> str:
        return (
            f"ArgumentCursor(argument_index={self.argument_index}, "
            f"char_offset={self.char_offset}, argc={len(self._argv)})"
        )
