"""Character stream consumed by the reader."""

from typing import Optional


WHITESPACE = frozenset(" \t\r\n")


class CharStream:
    """A string read one character at a time, with one-step lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def read_char(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        if self.position >= len(self.text):
            return None
        char = self.text[self.position]
        self.position += 1
        return char

    def peek_char(self) -> Optional[str]:
        """Return the next character without consuming it."""
        if self.position >= len(self.text):
            return None
        return self.text[self.position]

    def unread_char(self) -> None:
        """Step back over the last consumed character."""
        if self.position > 0:
            self.position -= 1

    def at_eof(self) -> bool:
        return self.position >= len(self.text)

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1
