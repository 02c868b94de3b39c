"""
This module provides an Extensions object to contain the vendor-specific,
namespaced content GPX allows on documents, metadata, routes, tracks, track
segments and points.
"""
from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any

from lxml import etree

from .context import ExtensionNamespace, RenderContext
from .element import GPX_NAMESPACE, Element
from .serialization import float_or_none, serialize

logger = logging.getLogger(__name__)

#: Garmin TrackPointExtension, version 1.
TRACK_POINT_EXTENSION_V1 = ExtensionNamespace(
    "gpxtpx",
    "http://www.garmin.com/xmlschemas/TrackPointExtension/v1",
    "http://www.garmin.com/xmlschemas/TrackPointExtensionv1.xsd",
)

#: Garmin TrackPointExtension, version 2.
TRACK_POINT_EXTENSION_V2 = ExtensionNamespace(
    "gpxtpx",
    "http://www.garmin.com/xmlschemas/TrackPointExtension/v2",
    "http://www.garmin.com/xmlschemas/TrackPointExtensionv2.xsd",
)

#: Garmin GPX extensions, version 3.
GPX_EXTENSIONS_V3 = ExtensionNamespace(
    "gpxx",
    "http://www.garmin.com/xmlschemas/GpxExtensions/v3",
    "http://www.garmin.com/xmlschemas/GpxExtensionsv3.xsd",
)

#: Schema locations of well-known extension namespaces, by URI.
KNOWN_SCHEMA_LOCATIONS: dict[str, str] = {
    ns.uri: ns.schema_location  # type: ignore[misc]
    for ns in (TRACK_POINT_EXTENSION_V1, TRACK_POINT_EXTENSION_V2, GPX_EXTENSIONS_V3)
}

_TRACK_POINT_EXTENSIONS = {
    ns.uri: ns for ns in (TRACK_POINT_EXTENSION_V1, TRACK_POINT_EXTENSION_V2)
}


class TrackPointExtension(Element):
    """Garmin's TrackPointExtension, carrying sensor data for a track point.

    Args:
        element: The `TrackPointExtension` XML element. Defaults to `None`.
    """

    #: The fields of the extension, in schema order.
    fields = ("atemp", "wtemp", "depth", "hr", "cad", "speed", "course", "bearing")

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: The namespace the extension is rendered in.
        self.namespace: ExtensionNamespace = TRACK_POINT_EXTENSION_V1

        #: Air temperature (in degrees Celsius).
        self.atemp: float | None = None

        #: Water temperature (in degrees Celsius).
        self.wtemp: float | None = None

        #: Depth (in metres).
        self.depth: float | None = None

        #: Heart rate (in beats per minute).
        self.hr: float | None = None

        #: Cadence (in revolutions per minute).
        self.cad: float | None = None

        #: Speed (in metres per second).
        self.speed: float | None = None

        #: Course (in degrees).
        self.course: float | None = None

        #: Bearing (in degrees).
        self.bearing: float | None = None

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        uri = etree.QName(self._element).namespace
        self.namespace = _TRACK_POINT_EXTENSIONS.get(uri, TRACK_POINT_EXTENSION_V1)

        for child in self._element:
            if not isinstance(child.tag, str):  # comments, processing instructions
                continue
            name = etree.QName(child).localname
            if name in self.fields and child.text is not None:
                setattr(self, name, float(child.text))

    def _build(
        self, context: RenderContext, tag: str = "TrackPointExtension"
    ) -> etree._Element:
        context.use_namespace(self.namespace)

        nsmap = {self.namespace.prefix: self.namespace.uri}
        extension = etree.Element(f"{{{self.namespace.uri}}}{tag}", nsmap=nsmap)
        for name in self.fields:
            if (value := getattr(self, name)) is not None:
                child = etree.SubElement(extension, f"{{{self.namespace.uri}}}{name}")
                child.text = _format_number(value)

        return extension

    def to_dict(self) -> dict[str, Any]:
        return {name: float_or_none(getattr(self, name)) for name in self.fields}


class Extensions(Element):
    """An extensions class for the GPX data format.

    Holds three kinds of content:

    - Garmin's :class:`TrackPointExtension`, parsed into fields.
    - Plain key/value pairs in the GPX (or no) namespace, in :attr:`unsupported`.
    - Any other namespaced XML, kept as opaque lxml elements in :attr:`elements`.

    Args:
        element: The extensions XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: Garmin track point sensor data.
        self.track_point_extension: TrackPointExtension | None = None

        #: Un-namespaced key/value content.
        self.unsupported: dict[str, str | None] = {}

        #: Opaque namespaced elements, preserved as-is.
        self.elements: list[etree._Element] = []

        #: Schema locations of the namespaces of :attr:`elements`, by URI.
        self.schema_locations: dict[str, str] = {}

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        for child in self._element:
            if not isinstance(child.tag, str):  # comments, processing instructions
                continue
            qname = etree.QName(child)
            if (
                qname.localname == "TrackPointExtension"
                and qname.namespace in _TRACK_POINT_EXTENSIONS
            ):
                self.track_point_extension = TrackPointExtension(child)
            elif qname.namespace in (None, GPX_NAMESPACE):
                self.unsupported[qname.localname] = child.text
            else:
                self.elements.append(deepcopy(child))

    def add_element(
        self, namespace: ExtensionNamespace, tag: str, text: str | None = None
    ) -> etree._Element:
        """Add an opaque element in `namespace`.

        Args:
            namespace: The namespace of the new element.
            tag: The local name of the new element.
            text: The text of the new element. Defaults to `None`.

        Returns:
            The new element, so that children can be added to it.
        """
        element = etree.Element(
            f"{{{namespace.uri}}}{tag}", nsmap={namespace.prefix: namespace.uri}
        )
        element.text = text
        self.elements.append(element)
        if namespace.schema_location is not None:
            self.schema_locations[namespace.uri] = namespace.schema_location
        return element

    def _namespaces(self) -> list[ExtensionNamespace]:
        """The namespaces used anywhere inside :attr:`elements`."""
        namespaces: dict[str, ExtensionNamespace] = {}
        for element in self.elements:
            for node in element.iter():
                if not isinstance(node.tag, str):
                    continue
                uri = etree.QName(node).namespace
                if uri is None or uri in namespaces:
                    continue
                if node.prefix is None:
                    logger.debug("Keeping local default namespace %s", uri)
                    continue
                namespaces[uri] = ExtensionNamespace(
                    node.prefix,
                    uri,
                    self.schema_locations.get(uri, KNOWN_SCHEMA_LOCATIONS.get(uri)),
                )
        return list(namespaces.values())

    def _build(
        self, context: RenderContext, tag: str = "extensions"
    ) -> etree._Element:
        extensions = super()._build(context, tag)

        if self.track_point_extension is not None:
            extensions.append(self.track_point_extension._build(context))

        for key, value in self.unsupported.items():
            child = etree.SubElement(extensions, self._qname(key))
            child.text = value

        for namespace in self._namespaces():
            context.use_namespace(namespace)
        for element in self.elements:
            extensions.append(deepcopy(element))

        return extensions

    def to_dict(self) -> dict[str, Any]:
        return {
            "trackpointextension": serialize(self.track_point_extension),
            "unsupported": dict(self.unsupported),
            "elements": [
                {_prefixed_name(element): _element_value(element)}
                for element in self.elements
            ],
        }


def _format_number(value: float) -> str:
    """Formats a number without a trailing `.0` for whole values."""
    return str(int(value)) if float(value).is_integer() else str(value)


def _prefixed_name(element: etree._Element) -> str:
    name = etree.QName(element).localname
    return f"{element.prefix}:{name}" if element.prefix else name


def _element_value(element: etree._Element) -> Any:
    """The text of a leaf element, or a dict of its children's values."""
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        return element.text
    return {_prefixed_name(child): _element_value(child) for child in children}
