"""Minimal s-expression reader with pluggable macro characters."""

from dataclasses import dataclass
from typing import Any, List, Optional

from pseudonyms.errors import ReaderEOFError, ReaderError

from .dispatch import DispatchTable, standard_dispatch_table
from .stream import WHITESPACE, CharStream

TERMINATORS = WHITESPACE | frozenset("()")


@dataclass
class ReaderContext:
    """Parse-time state shared with reader extensions."""

    current_namespace: str = "user"


class Reader:
    """Reads atoms and lists, delegating macro characters to handlers.

    Atoms are returned as strings and lists as Python lists. Whatever a
    handler returns is passed through unchanged.
    """

    def __init__(
        self,
        table: Optional[DispatchTable] = None,
        context: Optional[ReaderContext] = None
    ) -> None:
        self.table = table if table is not None else standard_dispatch_table
        self.context = context or ReaderContext()

    def read(self, stream: CharStream) -> Any:
        """Read the next datum from stream."""
        self._skip_blanks(stream)
        char = stream.read_char()
        if char is None:
            raise ReaderEOFError("Unexpected end of input", stream.line, stream.column)

        if char == "(":
            return self._read_list(stream)
        if char == ")":
            raise ReaderError("Unbalanced ')'", stream.line, stream.column)

        handler = self.table.get_macro_character(char)
        if handler is not None:
            token = handler.try_handle(char, stream, self)
            if token is not None:
                return token
        return self._read_atom(char, stream)

    def read_all(self, text: str) -> List[Any]:
        """Read every datum in text."""
        stream = CharStream(text)
        data = []
        while True:
            self._skip_blanks(stream)
            if stream.at_eof():
                return data
            data.append(self.read(stream))

    def _read_list(self, stream: CharStream) -> List[Any]:
        items = []
        while True:
            self._skip_blanks(stream)
            char = stream.peek_char()
            if char is None:
                raise ReaderEOFError("Unterminated list", stream.line, stream.column)
            if char == ")":
                stream.read_char()
                return items
            items.append(self.read(stream))

    def _read_atom(self, first: str, stream: CharStream) -> str:
        chars = [first]
        while True:
            char = stream.peek_char()
            if char is None or char in TERMINATORS:
                return "".join(chars)
            chars.append(stream.read_char())

    def _skip_blanks(self, stream: CharStream) -> None:
        while True:
            char = stream.peek_char()
            if char is None:
                return
            if char in WHITESPACE:
                stream.read_char()
            elif char == ";":
                # Comment runs to end of line
                while char is not None and char != "\n":
                    char = stream.read_char()
            else:
                return
