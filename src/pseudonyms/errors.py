"""Error taxonomy for alias registration and resolution."""

from typing import Any, Optional


class PseudonymError(Exception):
    """Base class for all errors raised by the pseudonyms package."""


class TypeMismatchError(PseudonymError, TypeError):
    """An argument is not a string."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be a string, got {type(value).__name__}: {value!r}"
        )


class EmptyArgumentError(PseudonymError, ValueError):
    """A scope, alias or namespace name is the empty string."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be empty")


class AlreadyBoundError(PseudonymError, ValueError):
    """Registering would break the alias <-> namespace bijection of a scope."""

    def __init__(self, scope: str, requested: str, existing: str, kind: str) -> None:
        self.scope = scope
        self.requested = requested
        self.existing = existing
        self.kind = kind
        if kind == "alias":
            message = f"Alias {requested!r} is already bound to namespace {existing!r} in {scope}"
        else:
            message = f"Namespace {requested!r} already has alias {existing!r} in {scope}"
        super().__init__(message)


class MalformedAliasError(PseudonymError, ValueError):
    """The characters following the marker do not form a valid alias."""

    def __init__(self, alias: str, reason: str) -> None:
        self.alias = alias
        self.reason = reason
        super().__init__(f"Malformed alias {alias!r}: {reason}")


class UnknownPseudonymError(PseudonymError, LookupError):
    """No namespace is bound to the alias in the active scope."""

    def __init__(self, alias: str, scope: str) -> None:
        self.alias = alias
        self.scope = scope
        super().__init__(f"Unknown alias {alias!r} in {scope}")


class VisibilityError(PseudonymError):
    """An identifier was referenced with a single separator but is not exported."""

    def __init__(self, identifier: str, namespace: str) -> None:
        self.identifier = identifier
        self.namespace = namespace
        super().__init__(f"Identifier {identifier!r} is not external in namespace {namespace!r}")


class UnknownNamespaceError(PseudonymError, LookupError):
    """The namespace catalog has no namespace with the given name."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Namespace {namespace!r} does not exist")


class ReaderError(PseudonymError):
    """Syntax error raised by the host reader."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ReaderEOFError(ReaderError):
    """Input ended in the middle of a datum."""


class ConfigError(PseudonymError, ValueError):
    """The configuration file could not be loaded."""
