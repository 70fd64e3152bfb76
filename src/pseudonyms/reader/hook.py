"""Binding of the resolver to its marker character."""

import logging
from typing import ClassVar, Optional

from .dispatch import DispatchTable, TokenHandler

logger = logging.getLogger(__name__)


class ReaderHook:
    """Keeps one handler bound to one marker character.

    Only a single marker is active per process: installing with a new
    marker or table unbinds the previous one first.
    """

    active_marker: ClassVar[Optional[str]] = None
    active_table: ClassVar[Optional[DispatchTable]] = None

    def __init__(self, handler: TokenHandler) -> None:
        self.handler = handler

    def install(self, table: DispatchTable, marker: str) -> None:
        """Bind the handler to marker in table."""
        separator = getattr(self.handler, "separator", None)
        if marker == separator:
            raise ValueError(f"Marker {marker!r} must differ from the separator")

        previous_table = ReaderHook.active_table
        previous_marker = ReaderHook.active_marker

        table.set_macro_character(marker, self.handler)
        if previous_table is not None and (previous_table is not table or previous_marker != marker):
            previous_table.remove_macro_character(previous_marker)
            logger.debug("Unbound marker %r", previous_marker)

        ReaderHook.active_table = table
        ReaderHook.active_marker = marker
        logger.debug("Bound marker %r", marker)
