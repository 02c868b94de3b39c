"""
This module provides the per-render state shared by the XML codecs of one
document.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionNamespace:
    """An XML namespace used by GPX extensions.

    Args:
        prefix: The prefix the namespace is declared with, e.g. `gpxtpx`.
        uri: The namespace URI.
        schema_location: The URL of the namespace's XSD, if known.
    """

    prefix: str
    uri: str
    schema_location: str | None = None


class RenderContext:
    """Collects the extension namespaces used while rendering one document.

    A new context is created for every XML render and passed down to every
    nested ``_build`` call. The document root reads :attr:`used_namespaces`
    once all of its children have been built.
    """

    def __init__(self) -> None:
        #: Used namespaces, keyed by prefix, in first-use order.
        self.used_namespaces: dict[str, ExtensionNamespace] = {}

    def use_namespace(self, namespace: ExtensionNamespace) -> None:
        """Record that `namespace` is used. Each prefix is recorded once."""
        known = self.used_namespaces.get(namespace.prefix)
        if known is None:
            self.used_namespaces[namespace.prefix] = namespace
        elif known.uri != namespace.uri:
            logger.warning(
                "Prefix %r is already bound to %s, ignoring %s",
                namespace.prefix,
                known.uri,
                namespace.uri,
            )
        elif known.schema_location is None and namespace.schema_location:
            self.used_namespaces[namespace.prefix] = namespace

    @property
    def nsmap(self) -> dict[str, str]:
        """The used namespaces as an lxml namespace map."""
        return {prefix: ns.uri for prefix, ns in self.used_namespaces.items()}
