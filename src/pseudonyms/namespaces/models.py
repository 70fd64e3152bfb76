"""Namespace and identifier models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Set


class Visibility(Enum):
    """Visibility of an identifier within a namespace."""

    EXTERNAL = "EXTERNAL"
    INTERNAL = "INTERNAL"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class CanonicalIdentifier:
    """A fully-qualified identifier, interned by its home namespace."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.name}"


@dataclass
class Namespace:
    """A named collection of identifiers, some of them exported."""

    name: str
    present: Dict[str, CanonicalIdentifier] = field(default_factory=dict)
    exported: Set[str] = field(default_factory=set)

    def visibility_of(self, name: str) -> Visibility:
        if name not in self.present:
            return Visibility.NOT_FOUND
        if name in self.exported:
            return Visibility.EXTERNAL
        return Visibility.INTERNAL
