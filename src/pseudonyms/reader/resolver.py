"""Reader extension that expands alias-prefixed tokens."""

from enum import Enum
import logging
from typing import Any, Optional

from pseudonyms.errors import (
    MalformedAliasError,
    PseudonymError,
    TypeMismatchError,
    UnknownPseudonymError,
    VisibilityError,
)
from pseudonyms.namespaces import CanonicalIdentifier, NamespaceService, Visibility
from pseudonyms.registry import AliasRegistry

from .dispatch import TokenHandler
from .reader import Reader
from .stream import WHITESPACE, CharStream

logger = logging.getLogger(__name__)


class ResolverState(Enum):
    """Progress of a single token resolution."""

    IDLE = "IDLE"
    READING_ALIAS = "READING_ALIAS"
    CHECKING_VISIBILITY_MARKER = "CHECKING_VISIBILITY_MARKER"
    READING_IDENTIFIER = "READING_IDENTIFIER"
    RESOLVED = "RESOLVED"
    FAILED = "FAILED"


class PseudonymResolver(TokenHandler):
    """Turns ``<marker><alias><sep><identifier>`` into a canonical identifier.

    The alias is looked up in the scope of the reader's current namespace.
    A single separator only admits identifiers the target namespace
    exports; a doubled separator admits any identifier and interns it.
    """

    def __init__(
        self,
        registry: AliasRegistry,
        namespaces: NamespaceService,
        separator: str = ":",
        enabled: bool = True
    ) -> None:
        self.registry = registry
        self.namespaces = namespaces
        self.separator = separator
        self.enabled = enabled
        self.state = ResolverState.IDLE

    def try_handle(self, marker: str, stream: CharStream, reader: Reader) -> Optional[CanonicalIdentifier]:
        if not self.enabled:
            return None

        try:
            self.state = ResolverState.READING_ALIAS
            alias = self._read_alias(stream)

            scope = reader.context.current_namespace
            namespace_name = self.registry.lookup_by_alias(scope, alias)
            if namespace_name is None:
                logger.info("Unknown alias %s in %s", alias, scope)
                raise UnknownPseudonymError(alias, scope)

            self.state = ResolverState.CHECKING_VISIBILITY_MARKER
            stream.read_char()
            intern_p = False
            if stream.peek_char() == self.separator:
                stream.read_char()
                intern_p = True

            self.state = ResolverState.READING_IDENTIFIER
            identifier = self._identifier_name(reader.read(stream))
            token = self._resolve(namespace_name, identifier, intern_p)
        except PseudonymError:
            self.state = ResolverState.FAILED
            raise

        self.state = ResolverState.RESOLVED
        logger.debug("Resolved %s%s -> %s", marker, alias, token)
        return token

    def _read_alias(self, stream: CharStream) -> str:
        """Consume characters up to, not including, the separator."""
        chars = []
        while True:
            char = stream.peek_char()
            if char == self.separator:
                break
            if char is None:
                raise MalformedAliasError("".join(chars), "input ended before separator")
            stream.read_char()
            if char in WHITESPACE:
                raise MalformedAliasError("".join(chars) + char, "alias contains whitespace")
            chars.append(char)

        if not chars:
            raise MalformedAliasError("", "alias is empty")
        return "".join(chars)

    def _identifier_name(self, datum: Any) -> str:
        if isinstance(datum, str):
            return datum
        # A nested alias already produced a canonical identifier
        if isinstance(datum, CanonicalIdentifier):
            return datum.name
        raise TypeMismatchError("identifier", datum)

    def _resolve(self, namespace_name: str, identifier: str, intern_p: bool) -> CanonicalIdentifier:
        if intern_p:
            return self.namespaces.intern(namespace_name, identifier)

        canonical, visibility = self.namespaces.resolve(namespace_name, identifier)
        if visibility is not Visibility.EXTERNAL:
            logger.info("%s is %s in %s", identifier, visibility.value, namespace_name)
            raise VisibilityError(identifier, namespace_name)
        return canonical
