"""
This module provides a GpxFile object to contain GPX files, consisting of
waypoints, routes and tracks, and to convert them to GPX/XML, JSON and GeoJSON.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from lxml import etree

from .config import settings, signature
from .context import RenderContext
from .element import GPX_NAMESPACE, GPX_SCHEMA_LOCATION, XSI_NAMESPACE, Element
from .errors import InvalidGPXError, UnsupportedFormatError
from .extensions import Extensions
from .metadata import Metadata
from .person import Person
from .point import Point
from .route import Route
from .serialization import serialize, string_or_none
from .track import Track
from .typing import GeoJSONFeature, GeoJSONFeatureCollection
from .utils import (
    CustomJSONEncoder,
    format_output_datetime,
    remove_encoding_from_string,
)

logger = logging.getLogger(__name__)


class Format(str, Enum):
    """The output formats a :class:`GpxFile` can be saved as."""

    XML = "xml"
    JSON = "json"
    GEOJSON_POINTS = "geojson-points"
    GEOJSON_LINES = "geojson-lines"

    @classmethod
    def parse(cls, value: Format | str) -> Format:
        """Resolve a format or its string value.

        Raises:
            UnsupportedFormatError: If `value` names no known format.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported file format: {value!r}") from None


class GpxFile(Element):
    """A GPX file.

    GPX documents contain a metadata header, followed by waypoints, routes, and
    tracks. You can add your own elements to the extensions section of the GPX
    document.

    Args:
        element: The GPX XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: The name or URL of the software that created your GPX document.
        #: When `None`, the library signature is written instead.
        self.creator: str | None = None

        #: Metadata about the file.
        self.metadata: Metadata | None = None

        #: A list of waypoints.
        self.wpts: list[Point] = []
        self.waypoints = self.wpts  #: Alias of :attr:`wpts`.

        #: A list of routes.
        self.rtes: list[Route] = []
        self.routes = self.rtes  #: Alias of :attr:`rtes`.

        #: A list of tracks.
        self.trks: list[Track] = []
        self.tracks = self.trks  #: Alias of :attr:`trks`.

        #: Vendor-specific extensions of the document.
        self.extensions: Extensions | None = None

        #: Schema locations declared by the parsed document, by namespace URI.
        self.schema_locations: dict[str, str] = {}

        if self._element is not None:
            self._parse()

    @property
    def name(self) -> str | None:
        """The name of the GPX file.

        Proxy of :attr:`gpxkit.metadata.Metadata.name`.
        """
        if self.metadata is not None:
            return self.metadata.name
        return None

    @name.setter
    def name(self, value: str):
        if self.metadata is None:
            self.metadata = Metadata()
        self.metadata.name = value

    @property
    def desc(self) -> str | None:
        """A description of the contents of the GPX file.

        Proxy of :attr:`gpxkit.metadata.Metadata.desc`.
        """
        if self.metadata is not None:
            return self.metadata.desc
        return None

    @desc.setter
    def desc(self, value: str):
        if self.metadata is None:
            self.metadata = Metadata()
        self.metadata.desc = value

    @property
    def author(self) -> Person | None:
        """The person or organization who created the GPX file.

        Proxy of :attr:`gpxkit.metadata.Metadata.author`.
        """
        if self.metadata is not None:
            return self.metadata.author
        return None

    @author.setter
    def author(self, value: Person):
        if self.metadata is None:
            self.metadata = Metadata()
        self.metadata.author = value

    @property
    def time(self) -> datetime | None:
        """The creation date of the file.

        Proxy of :attr:`gpxkit.metadata.Metadata.time`.
        """
        if self.metadata is not None:
            return self.metadata.time
        return None

    @time.setter
    def time(self, value: datetime):
        if self.metadata is None:
            self.metadata = Metadata()
        self.metadata.time = value

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        qname = etree.QName(self._element)
        if qname.localname != "gpx" or qname.namespace != GPX_NAMESPACE:
            raise InvalidGPXError(f"Not a GPX 1.1 document: {self._element.tag}")

        # creator
        self.creator = self._element.get("creator")

        # schema locations, as "uri xsd" pairs
        locations = self._element.get(f"{{{XSI_NAMESPACE}}}schemaLocation", "").split()
        self.schema_locations = dict(zip(locations[::2], locations[1::2]))

        # metadata
        if (
            metadata := self._element.find("metadata", namespaces=self._nsmap)
        ) is not None:
            self.metadata = Metadata(metadata)

        # waypoints
        for wpt in self._element.iterfind("wpt", namespaces=self._nsmap):
            self.wpts.append(Point(wpt))

        # routes
        for rte in self._element.iterfind("rte", namespaces=self._nsmap):
            self.rtes.append(Route(rte))

        # tracks
        for trk in self._element.iterfind("trk", namespaces=self._nsmap):
            self.trks.append(Track(trk))

        # extensions
        if (
            extensions := self._element.find("extensions", namespaces=self._nsmap)
        ) is not None:
            self.extensions = Extensions(extensions)

        logger.debug(
            "Parsed %d waypoints, %d routes and %d tracks",
            len(self.wpts),
            len(self.rtes),
            len(self.trks),
        )

    def _build(self, context: RenderContext, tag: str = "gpx") -> etree._Element:
        children: list[etree._Element] = []

        # metadata
        if self.metadata is not None:
            children.append(self.metadata._build(context))

        # waypoints
        for wpt in self.wpts:
            children.append(wpt._build(context, tag="wpt"))

        # routes
        for rte in self.rtes:
            children.append(rte._build(context))

        # tracks
        for trk in self.trks:
            children.append(trk._build(context))

        # extensions
        if self.extensions is not None:
            children.append(self.extensions._build(context))

        # the root is created last, once every used namespace is known, so
        # that each one is declared here and nowhere below
        nsmap = {**self._nsmap, "xsi": XSI_NAMESPACE, **context.nsmap}
        gpx = etree.Element(self._qname(tag), nsmap=nsmap)

        # set version and creator attributes
        gpx.set("version", "1.1")
        gpx.set("creator", self.creator or signature())

        schema_locations = [GPX_NAMESPACE, GPX_SCHEMA_LOCATION]
        for namespace in context.used_namespaces.values():
            location = namespace.schema_location or self.schema_locations.get(
                namespace.uri
            )
            if location is None:
                logger.debug("No schema location known for %s", namespace.uri)
                continue
            schema_locations += [namespace.uri, location]
        gpx.set(f"{{{XSI_NAMESPACE}}}schemaLocation", " ".join(schema_locations))

        gpx.extend(children)

        return gpx

    @classmethod
    def from_string(cls, gpx_str: str) -> GpxFile:
        """Create a GpxFile instance from a string.

            >>> from gpxkit import GpxFile
            >>> gpx = GpxFile.from_string(\"\"\"<?xml version="1.0" encoding="UTF-8" ?>
            ... <gpx xmlns="http://www.topografix.com/GPX/1/1" creator="gpxkit" version="1.1">
            ...     [...]
            ... </gpx>\"\"\")
            >>> print(gpx.creator)

        Args:
            gpx_str: The string containing the GPX data.

        Returns:
            The GpxFile instance.
        """
        # etree.fromstring() does not support encoding declarations in the string itself.
        gpx_str = remove_encoding_from_string(gpx_str)
        parser = etree.XMLParser(remove_blank_text=True)
        return cls(etree.fromstring(gpx_str, parser=parser))

    @classmethod
    def from_file(cls, gpx_file: str | Path) -> GpxFile:
        """Create a GpxFile instance from a file.

            >>> from gpxkit import GpxFile
            >>> gpx = GpxFile.from_file("path/to/file.gpx")
            >>> print(len(gpx.tracks))

        Args:
            gpx_file: The file containing the GPX data.

        Returns:
            The GpxFile instance.
        """
        parser = etree.XMLParser(remove_blank_text=True)
        gpx_tree = etree.parse(str(gpx_file), parser=parser)
        return cls(gpx_tree.getroot())

    def to_dict(self) -> dict[str, Any]:
        """Serialize the GpxFile instance to a value tree.

        The tree always holds the same six keys; absent data is `None` or an
        empty list.
        """
        return {
            "creator": string_or_none(self.creator),
            "metadata": serialize(self.metadata),
            "waypoints": serialize(self.wpts),
            "routes": serialize(self.rtes),
            "tracks": serialize(self.trks),
            "extensions": serialize(self.extensions),
        }

    def to_json(self) -> str:
        """Serialize the GpxFile instance to a JSON string."""
        return json.dumps(
            self.to_dict(),
            indent=4 if settings.pretty_print else None,
            cls=CustomJSONEncoder,
        )

    def to_xml(self) -> etree._ElementTree:
        """Build the GPX 1.1 XML document of the GpxFile instance.

        Returns:
            The XML document.
        """
        return etree.ElementTree(self._build(RenderContext()))

    def to_string(self) -> str:
        """Serialize the GpxFile instance to a GPX/XML string.

        Returns:
            The GPX data as a string.
        """
        return etree.tostring(
            self.to_xml(), encoding="unicode", pretty_print=settings.pretty_print
        )

    def to_file(self, gpx_file: str | Path) -> None:
        """Serialize the GpxFile instance to a GPX/XML file.

        Args:
            gpx_file: The file to write the GPX data to.
        """
        self.to_xml().write(
            str(gpx_file),
            pretty_print=settings.pretty_print,
            xml_declaration=True,
            encoding="utf-8",
        )

    def to_geojson(
        self, format: Format | str | None = Format.GEOJSON_POINTS
    ) -> GeoJSONFeatureCollection:
        """Convert the GpxFile instance to a `GeoJSON <https://geojson.org/>`_
        `FeatureCollection`.

        In points mode every track point becomes a `Point` feature; in lines
        mode every track becomes one `LineString` feature. Both modes then add
        a `Point` feature per waypoint. Routes are not included.

        Args:
            format: :attr:`Format.GEOJSON_POINTS` (the default, also used for
                `None`) or :attr:`Format.GEOJSON_LINES`.

        Returns:
            The GeoJSON object.

        Raises:
            UnsupportedFormatError: If `format` is not a GeoJSON format.
        """
        format = Format.GEOJSON_POINTS if format is None else Format.parse(format)
        if format is Format.GEOJSON_POINTS:
            features = self._geojson_point_features()
        elif format is Format.GEOJSON_LINES:
            features = self._geojson_line_features()
        else:
            raise UnsupportedFormatError(f"Not a GeoJSON format: {format.value!r}")

        features += [self._geojson_waypoint_feature(wpt) for wpt in self.wpts]

        return {
            "type": "FeatureCollection",
            "name": "track_points",
            "crs": {
                "type": "name",
                "properties": {"name": "urn:ogc:def:crs:OGC:1.3:CRS84"},
            },
            "features": features,
        }

    def to_geojson_string(self, format: Format | str | None = Format.GEOJSON_POINTS) -> str:
        """Convert the GpxFile instance to a `GeoJSON <https://geojson.org/>`_
        string. See :meth:`to_geojson`.
        """
        return json.dumps(self.to_geojson(format), cls=CustomJSONEncoder)

    def _geojson_point_features(self) -> list[GeoJSONFeature]:
        features: list[GeoJSONFeature] = []
        for track_index, trk in enumerate(self.trks):
            for segment_index, trkseg in enumerate(trk.trksegs):
                for point_index, trkpt in enumerate(trkseg.trkpts):
                    features.append(
                        {
                            "type": "Feature",
                            "properties": {
                                "ele": trkpt.ele,
                                "track_fid": track_index,
                                "track_seg_id": segment_index,
                                "track_seg_point_id": point_index,
                                "time": format_output_datetime(trkpt.time),
                            },
                            "geometry": {
                                "type": "Point",
                                "coordinates": trkpt._geojson_coordinates,
                            },
                        }
                    )
        return features

    def _geojson_line_features(self) -> list[GeoJSONFeature]:
        features: list[GeoJSONFeature] = []
        for trk in self.trks:
            points = trk.points
            times = [format_output_datetime(trkpt.time) for trkpt in points]
            features.append(
                {
                    "type": "Feature",
                    "properties": {
                        "name": trk.name,
                        # an empty track has no first timestamp
                        "time": times[0] if times else None,
                        "coordTimes": times,
                    },
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [trkpt._geojson_coordinates for trkpt in points],
                    },
                }
            )
        return features

    @staticmethod
    def _geojson_waypoint_feature(wpt: Point) -> GeoJSONFeature:
        return {
            "type": "Feature",
            "properties": {
                "type": wpt.type,
                "name": wpt.name,
                "comment": wpt.cmt,
                "description": wpt.desc,
                "ele": wpt.ele,
                "time": format_output_datetime(wpt.time),
            },
            "geometry": {
                "type": "Point",
                "coordinates": wpt._geojson_coordinates,
            },
        }

    def save(self, path: str | Path, format: Format | str) -> None:
        """Save the GpxFile instance to `path` in the given format.

        The format is resolved before the file is opened, so an unsupported
        format leaves `path` untouched.

        Args:
            path: The file to write to.
            format: The output format, as a :class:`Format` or its value
                (`xml`, `json`, `geojson-points` or `geojson-lines`).

        Raises:
            UnsupportedFormatError: If `format` is not supported.
        """
        format = Format.parse(format)
        logger.debug("Saving %s as %s", path, format.value)

        if format is Format.XML:
            self.to_file(path)
            return

        if format is Format.JSON:
            content = self.to_json()
        else:
            content = self.to_geojson_string(format)

        with open(path, "w", encoding="utf-8") as fh:
            fh.write(content)
