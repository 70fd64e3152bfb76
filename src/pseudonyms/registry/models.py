"""Alias registry data models."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class AliasEntry:
    """A single alias binding inside a scope."""

    namespace_name: str
    alias: str

    def to_dict(self) -> Dict[str, str]:
        """Convert entry to dictionary."""
        return {
            "namespace_name": self.namespace_name,
            "alias": self.alias,
        }


@dataclass
class AliasTable:
    """Ordered alias bindings owned by one scope.

    Newest entries come first. No two entries share an alias and no two
    share a namespace name.
    """

    scope: str
    entries: List[AliasEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self.entries)

    def find_by_alias(self, alias: str) -> Optional[AliasEntry]:
        for entry in self.entries:
            if entry.alias == alias:
                return entry
        return None

    def find_by_namespace(self, namespace_name: str) -> Optional[AliasEntry]:
        for entry in self.entries:
            if entry.namespace_name == namespace_name:
                return entry
        return None

    def push(self, entry: AliasEntry) -> None:
        """Insert an entry at the front of the table."""
        self.entries.insert(0, entry)

    def remove_matching(self, datum: str) -> Optional[AliasEntry]:
        """Remove the entry whose alias or namespace name equals datum."""
        for index, entry in enumerate(self.entries):
            if entry.alias == datum or entry.namespace_name == datum:
                return self.entries.pop(index)
        return None

    def pairs(self) -> List[Tuple[str, str]]:
        """Return (alias, namespace_name) pairs in table order."""
        return [(entry.alias, entry.namespace_name) for entry in self.entries]
