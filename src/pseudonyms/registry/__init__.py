"""Registry module initialization."""

from .models import AliasEntry, AliasTable
from .store import AliasRegistry, check_designator, default_registry, get_registry

__all__ = [
    "AliasEntry",
    "AliasTable",
    "AliasRegistry",
    "check_designator",
    "default_registry",
    "get_registry",
]
