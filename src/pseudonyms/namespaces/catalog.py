"""Identifier interning and visibility service."""

from abc import ABC, abstractmethod
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pseudonyms.errors import UnknownNamespaceError

from .models import CanonicalIdentifier, Namespace, Visibility

logger = logging.getLogger(__name__)


class NamespaceService(ABC):
    """Answers which identifiers a namespace holds and which it exports."""

    @abstractmethod
    def resolve(
        self,
        namespace_name: str,
        raw_identifier: str
    ) -> Tuple[Optional[CanonicalIdentifier], Visibility]:
        """Find an identifier without creating it.

        Args:
            namespace_name: Namespace to search
            raw_identifier: Identifier name as read from the input

        Returns:
            Tuple of (identifier or None, visibility)
        """
        pass

    @abstractmethod
    def intern(self, namespace_name: str, raw_identifier: str) -> CanonicalIdentifier:
        """Find an identifier, creating it as internal when absent."""
        pass


class NamespaceCatalog(NamespaceService):
    """In-memory namespace service."""

    def __init__(self) -> None:
        self._namespaces: Dict[str, Namespace] = {}

    def _get(self, namespace_name: str) -> Namespace:
        namespace = self._namespaces.get(namespace_name)
        if namespace is None:
            raise UnknownNamespaceError(namespace_name)
        return namespace

    def define_namespace(
        self,
        name: str,
        exports: Iterable[str] = (),
        internals: Iterable[str] = ()
    ) -> Namespace:
        """Create a namespace, or extend it if it already exists."""
        namespace = self._namespaces.get(name)
        if namespace is None:
            namespace = Namespace(name=name)
            self._namespaces[name] = namespace
            logger.debug("Defined namespace %s", name)

        for identifier in internals:
            self._add(namespace, identifier)
        for identifier in exports:
            self._add(namespace, identifier)
            namespace.exported.add(identifier)
        return namespace

    def _add(self, namespace: Namespace, identifier: str) -> CanonicalIdentifier:
        existing = namespace.present.get(identifier)
        if existing is None:
            existing = CanonicalIdentifier(namespace=namespace.name, name=identifier)
            namespace.present[identifier] = existing
        return existing

    def has_namespace(self, name: str) -> bool:
        return name in self._namespaces

    def namespaces(self) -> List[str]:
        return sorted(self._namespaces.keys())

    def identifiers(self, namespace_name: str) -> Dict[str, Visibility]:
        """Get every identifier present in a namespace with its visibility."""
        namespace = self._get(namespace_name)
        return {name: namespace.visibility_of(name) for name in sorted(namespace.present)}

    def export(self, namespace_name: str, identifier: str) -> CanonicalIdentifier:
        """Make an identifier external, interning it first if needed."""
        namespace = self._get(namespace_name)
        canonical = self._add(namespace, identifier)
        namespace.exported.add(identifier)
        return canonical

    def import_identifiers(self, target: str, source: str, names: Iterable[str]) -> None:
        """Make identifiers of source accessible in target.

        Imported identifiers are internal to target and resolve to the
        canonical objects of source.
        """
        target_ns = self._get(target)
        source_ns = self._get(source)
        for name in names:
            target_ns.present[name] = self._add(source_ns, name)
            logger.debug("Imported %s from %s into %s", name, source, target)

    def resolve(
        self,
        namespace_name: str,
        raw_identifier: str
    ) -> Tuple[Optional[CanonicalIdentifier], Visibility]:
        namespace = self._get(namespace_name)
        return namespace.present.get(raw_identifier), namespace.visibility_of(raw_identifier)

    def intern(self, namespace_name: str, raw_identifier: str) -> CanonicalIdentifier:
        return self._add(self._get(namespace_name), raw_identifier)
