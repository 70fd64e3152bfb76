"""Process-wide alias storage and lookup."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pseudonyms.errors import AlreadyBoundError, EmptyArgumentError, TypeMismatchError

from .models import AliasEntry, AliasTable

logger = logging.getLogger(__name__)


def check_string(argument: str, value: Any) -> str:
    """Ensure value is a string and return it."""
    if not isinstance(value, str):
        raise TypeMismatchError(argument, value)
    return value


def check_designator(argument: str, value: Any) -> str:
    """Ensure value is a non-empty string and return it."""
    check_string(argument, value)
    if not value:
        raise EmptyArgumentError(argument)
    return value


class AliasRegistry:
    """Storage for alias tables, keyed by owning scope.

    Within a scope the mapping between namespace names and aliases is a
    bijection. Comparisons are case-sensitive.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, AliasTable] = {}

    def _table(self, scope: str) -> Optional[AliasTable]:
        return self._tables.get(scope)

    def register(self, scope: str, namespace_name: str, alias: str) -> str:
        """Bind alias to namespace_name inside scope.

        Args:
            scope: Owning namespace of the binding
            namespace_name: Fully-qualified namespace the alias stands for
            alias: Short name to register

        Returns:
            Confirmation string of the form ``"<alias> => <namespace_name>"``

        Raises:
            AlreadyBoundError: If either side is already bound to something else
        """
        check_designator("scope", scope)
        check_designator("namespace_name", namespace_name)
        check_designator("alias", alias)

        table = self._table(scope)
        if table is not None:
            by_alias = table.find_by_alias(alias)
            if by_alias is not None and by_alias.namespace_name != namespace_name:
                logger.info("Alias %s already bound to %s in %s", alias, by_alias.namespace_name, scope)
                raise AlreadyBoundError(scope, alias, by_alias.namespace_name, "alias")

            by_namespace = table.find_by_namespace(namespace_name)
            if by_namespace is not None and by_namespace.alias != alias:
                logger.info("Namespace %s already aliased as %s in %s", namespace_name, by_namespace.alias, scope)
                raise AlreadyBoundError(scope, namespace_name, by_namespace.alias, "namespace")

            if by_alias is not None:
                # Identical pair, nothing to add
                return f"{alias} => {namespace_name}"
        else:
            table = AliasTable(scope=scope)
            self._tables[scope] = table

        table.push(AliasEntry(namespace_name=namespace_name, alias=alias))
        logger.debug("Registered %s => %s in %s", alias, namespace_name, scope)
        return f"{alias} => {namespace_name}"

    def unregister(self, scope: str, datum: str) -> str:
        """Remove the binding whose alias or namespace name equals datum.

        Unknown data are ignored. Always returns datum.
        """
        check_designator("scope", scope)
        check_designator("datum", datum)

        table = self._table(scope)
        if table is not None:
            removed = table.remove_matching(datum)
            if removed is not None:
                logger.debug("Unregistered %s => %s in %s", removed.alias, removed.namespace_name, scope)
        return datum

    def lookup_by_alias(self, scope: str, alias: str) -> Optional[str]:
        """Get the namespace name bound to alias, if any."""
        check_string("scope", scope)
        check_string("alias", alias)
        table = self._table(scope)
        if table is None:
            return None
        entry = table.find_by_alias(alias)
        return entry.namespace_name if entry else None

    def lookup_by_namespace(self, scope: str, namespace_name: str) -> Optional[str]:
        """Get the alias bound to namespace_name, if any."""
        check_string("scope", scope)
        check_string("namespace_name", namespace_name)
        table = self._table(scope)
        if table is None:
            return None
        entry = table.find_by_namespace(namespace_name)
        return entry.alias if entry else None

    def list(self, scope: str) -> List[Tuple[str, str]]:
        """Get (alias, namespace_name) pairs of a scope in table order."""
        table = self._table(scope)
        return table.pairs() if table is not None else []

    def entries(self, scope: str) -> List[AliasEntry]:
        table = self._table(scope)
        return list(table) if table is not None else []

    def scopes(self) -> List[str]:
        """Get every scope that has ever held a binding."""
        return list(self._tables.keys())

    def drop_scope(self, scope: str) -> None:
        """Forget a scope's table, e.g. when its namespace is deleted."""
        if self._tables.pop(scope, None) is not None:
            logger.debug("Dropped alias table of %s", scope)

    def clear(self) -> None:
        """Remove every table."""
        self._tables.clear()

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        """Convert the registry to a JSON-friendly dictionary."""
        return {
            scope: [entry.to_dict() for entry in table]
            for scope, table in self._tables.items()
        }

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about stored aliases."""
        return {
            "total_scopes": len(self._tables),
            "active_scopes": len([t for t in self._tables.values() if len(t) > 0]),
            "total_aliases": sum(len(t) for t in self._tables.values()),
        }


default_registry = AliasRegistry()


def get_registry() -> AliasRegistry:
    """Get the process-wide registry."""
    return default_registry
