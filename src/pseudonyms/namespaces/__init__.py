"""Namespaces module initialization."""

from .models import CanonicalIdentifier, Namespace, Visibility
from .catalog import NamespaceService, NamespaceCatalog

__all__ = [
    "CanonicalIdentifier",
    "Namespace",
    "Visibility",
    "NamespaceService",
    "NamespaceCatalog",
]
