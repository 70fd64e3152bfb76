"""Process-wide alias service and reader activation."""

import logging
from typing import Any, List, Optional, Tuple

from rich.console import Console

from pseudonyms.config import PseudonymsConfig
from pseudonyms.display import print_aliases
from pseudonyms.namespaces import NamespaceCatalog
from pseudonyms.reader import (
    DispatchTable,
    PseudonymResolver,
    Reader,
    ReaderContext,
    ReaderHook,
    standard_dispatch_table,
)
from pseudonyms.registry import AliasRegistry, default_registry

logger = logging.getLogger(__name__)

API_NAMESPACE = "pseudonyms"
LOOKUP_API = ("lookup-by-alias", "lookup-by-namespace")


class PseudonymService:
    """Bundles the registry, namespace catalog and reader hook.

    Operations taking an optional ``scope`` default to the current namespace
    of the service's reader context.
    """

    def __init__(
        self,
        registry: Optional[AliasRegistry] = None,
        catalog: Optional[NamespaceCatalog] = None,
        table: Optional[DispatchTable] = None,
        context: Optional[ReaderContext] = None,
        marker: str = "$",
        separator: str = ":"
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.catalog = catalog if catalog is not None else NamespaceCatalog()
        self.table = table if table is not None else standard_dispatch_table
        self.context = context or ReaderContext()
        self.marker = marker
        self.enabled = False

        self.catalog.define_namespace(API_NAMESPACE, exports=LOOKUP_API)
        self.catalog.define_namespace(self.context.current_namespace)

        self.resolver = PseudonymResolver(self.registry, self.catalog, separator=separator)
        self.hook = ReaderHook(self.resolver)

    @classmethod
    def from_config(
        cls,
        config: PseudonymsConfig,
        registry: Optional[AliasRegistry] = None,
        table: Optional[DispatchTable] = None
    ) -> "PseudonymService":
        """Build a service with the configured namespaces and aliases."""
        service = cls(
            registry=registry,
            catalog=config.build_catalog(),
            table=table,
            context=ReaderContext(current_namespace=config.current_namespace),
            marker=config.marker,
            separator=config.separator,
        )
        applied = config.apply_aliases(service.registry)
        logger.debug("Applied %d configured aliases", applied)
        if config.enabled:
            service.enable()
        return service

    def _scope(self, scope: Optional[str]) -> str:
        return scope if scope is not None else self.context.current_namespace

    def add_alias(self, namespace_name: str, alias: str, scope: Optional[str] = None) -> str:
        return self.registry.register(self._scope(scope), namespace_name, alias)

    def remove_alias(self, datum: str, scope: Optional[str] = None) -> str:
        return self.registry.unregister(self._scope(scope), datum)

    def find_namespace(self, alias: str, scope: Optional[str] = None) -> Optional[str]:
        return self.registry.lookup_by_alias(self._scope(scope), alias)

    def find_alias(self, namespace_name: str, scope: Optional[str] = None) -> Optional[str]:
        return self.registry.lookup_by_namespace(self._scope(scope), namespace_name)

    def list_aliases(self, scope: Optional[str] = None) -> List[Tuple[str, str]]:
        return self.registry.list(self._scope(scope))

    def print_aliases(self, scope: Optional[str] = None, console: Optional[Console] = None) -> int:
        return print_aliases(self._scope(scope), registry=self.registry, console=console)

    def enable(self, marker: Optional[str] = None) -> None:
        """Turn alias resolution on for the current namespace.

        Makes the lookup API available unqualified in the current namespace
        and binds the resolver to the marker character. Safe to repeat.
        """
        current = self.context.current_namespace
        self.catalog.define_namespace(current)
        self.catalog.import_identifiers(current, API_NAMESPACE, LOOKUP_API)

        marker = marker if marker is not None else self.marker
        self.hook.install(self.table, marker)
        self.marker = marker
        self.resolver.enabled = True
        self.enabled = True
        logger.debug("Alias resolution enabled in %s with marker %r", current, self.marker)

    def set_marker(self, marker: str) -> None:
        """Move the resolver to another marker character.

        Before enable() this only records the marker to use. Once enabled,
        the resolver is bound to marker even if another service has taken
        the previous marker over in the meantime.
        """
        if self.enabled:
            self.hook.install(self.table, marker)
        self.marker = marker

    def reader(self) -> Reader:
        return Reader(self.table, self.context)

    def read(self, text: str) -> List[Any]:
        """Read every datum in text, resolving aliased tokens."""
        return self.reader().read_all(text)


default_service: Optional[PseudonymService] = None


def get_service() -> PseudonymService:
    """Get the process-wide service, creating it on first use."""
    global default_service
    if default_service is None:
        default_service = PseudonymService()
    return default_service


def enable(
    context: Optional[ReaderContext] = None,
    marker: Optional[str] = None
) -> PseudonymService:
    """Enable alias resolution on the process-wide service.

    A given context replaces the service's own, so its current namespace
    receives the lookup API and scopes later reads.
    """
    service = get_service()
    if context is not None:
        service.context = context
    service.enable(marker)
    return service
