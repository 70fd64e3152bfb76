"""Single-character dispatch for reader extensions."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from pseudonyms.errors import TypeMismatchError

from .stream import WHITESPACE, CharStream

if TYPE_CHECKING:
    from .reader import Reader


class TokenHandler(ABC):
    """Abstract base class for character-triggered reader extensions."""

    @abstractmethod
    def try_handle(self, marker: str, stream: CharStream, reader: "Reader") -> Optional[Any]:
        """Read a token that starts with marker.

        Args:
            marker: The character that triggered the handler, already consumed
            stream: Input positioned just after the marker
            reader: The calling reader, for context and recursive reads

        Returns:
            The token read, or None to let the reader treat the marker as an
            ordinary character
        """
        pass


class DispatchTable:
    """Maps single characters to token handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, TokenHandler] = {}

    def set_macro_character(self, char: str, handler: TokenHandler) -> None:
        """Bind handler to char, replacing any previous binding."""
        if not isinstance(char, str):
            raise TypeMismatchError("char", char)
        if len(char) != 1 or char in WHITESPACE or char in "();":
            raise ValueError(f"Macro character must be a single non-syntax character: {char!r}")
        self._handlers[char] = handler

    def get_macro_character(self, char: str) -> Optional[TokenHandler]:
        return self._handlers.get(char)

    def remove_macro_character(self, char: str) -> Optional[TokenHandler]:
        return self._handlers.pop(char, None)

    def copy(self) -> "DispatchTable":
        table = DispatchTable()
        table._handlers = dict(self._handlers)
        return table

    def __contains__(self, char: str) -> bool:
        return char in self._handlers


standard_dispatch_table = DispatchTable()
