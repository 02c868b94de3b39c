"""This module provides the base class shared by all GPX elements."""
from __future__ import annotations

from typing import Any

from lxml import etree

from .context import RenderContext

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_SCHEMA_LOCATION = "http://www.topografix.com/GPX/1/1/gpx.xsd"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


class Element:
    """A base class for GPX elements.

    Subclasses read themselves from an XML element in :meth:`_parse`, render
    themselves back in :meth:`_build` and provide their value tree through
    :meth:`to_dict`.

    Args:
        element: The XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        #: The XML element this object was parsed from, if any.
        self._element = element

        #: Namespace map used to look up and create GPX elements.
        self._nsmap: dict[str | None, str] = {None: GPX_NAMESPACE}

    def _parse(self) -> None:
        if self._element is None:
            raise ValueError("No element to parse.")

    def _build(self, context: RenderContext, tag: str) -> etree._Element:
        return etree.Element(self._qname(tag), nsmap=self._nsmap)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the element to a value tree of dicts, lists and scalars."""
        raise NotImplementedError

    @staticmethod
    def _qname(tag: str) -> str:
        """The fully qualified name of a tag in the GPX namespace."""
        return f"{{{GPX_NAMESPACE}}}{tag}"

    def _find_text(self, tag: str) -> str | None:
        """The text of the first child with the given tag, if any."""
        assert self._element is not None
        if (child := self._element.find(tag, namespaces=self._nsmap)) is not None:
            return child.text
        return None

    def _sub_element(
        self, parent: etree._Element, tag: str, text: Any
    ) -> etree._Element | None:
        """Append a child holding `text` to `parent`, unless `text` is `None`."""
        if text is None:
            return None
        child = etree.SubElement(parent, self._qname(tag), nsmap=self._nsmap)
        child.text = str(text)
        return child
