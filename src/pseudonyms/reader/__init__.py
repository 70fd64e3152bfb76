"""Reader module initialization."""

from .stream import CharStream
from .dispatch import TokenHandler, DispatchTable, standard_dispatch_table
from .reader import Reader, ReaderContext
from .resolver import PseudonymResolver, ResolverState
from .hook import ReaderHook

__all__ = [
    "CharStream",
    "TokenHandler",
    "DispatchTable",
    "standard_dispatch_table",
    "Reader",
    "ReaderContext",
    "PseudonymResolver",
    "ResolverState",
    "ReaderHook",
]
