"""
This module provides a Point object to contain GPX waypoints, route points
and track points.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from dateutil.parser import isoparse
from lxml import etree

from .context import RenderContext
from .element import Element
from .errors import ParseError
from .extensions import Extensions
from .link import Link
from .serialization import serialize
from .typing import GeoJSONPosition
from .utils import format_datetime, format_output_datetime


class Point(Element):
    """A point class for the GPX data format.

    A point represents a waypoint, point of interest, or named feature on a
    map. The same class is used for standalone waypoints (`wpt`), route points
    (`rtept`) and track points (`trkpt`); the tag is chosen when building.

    Args:
        element: The point XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: The latitude of the point. Decimal degrees, WGS84 datum.
        self.lat: float

        #: The longitude of the point. Decimal degrees, WGS84 datum.
        self.lon: float

        #: Elevation (in meters) of the point.
        self.ele: float | None = None

        #: Creation/modification timestamp for element. Date and time in are in
        #: Universal Coordinated Time (UTC), not local time! Conforms to ISO
        #: 8601 specification for date/time representation. Fractional seconds
        #: are allowed for millisecond timing in tracklogs.
        self.time: datetime | None = None

        #: Magnetic variation (in degrees) at the point
        self.magvar: float | None = None

        #: Height (in meters) of geoid (mean sea level) above WGS84 earth
        #: ellipsoid. As defined in NMEA GGA message.
        self.geoidheight: float | None = None

        #: The GPS name of the point.
        self.name: str | None = None

        #: GPS comment. Sent to GPS as comment.
        self.cmt: str | None = None

        #: A text description of the element. Holds additional information about
        #: the element intended for the user, not the GPS.
        self.desc: str | None = None

        #: Source of data. Included to give user some idea of reliability and
        #: accuracy of data. "Garmin eTrex", "USGS quad Boston North", e.g.
        self.src: str | None = None

        #: Links to additional information about the point.
        self.links: list[Link] = []

        #: Text of GPS symbol name.
        self.sym: str | None = None

        #: Type (classification) of the point.
        self.type: str | None = None

        #: Type of GPX fix: none, 2d, 3d, dgps or pps.
        self.fix: str | None = None

        #: Number of satellites used to calculate the GPX fix.
        self.sat: int | None = None

        #: Horizontal dilution of precision.
        self.hdop: float | None = None

        #: Vertical dilution of precision.
        self.vdop: float | None = None

        #: Position dilution of precision.
        self.pdop: float | None = None

        #: Number of seconds since last DGPS update.
        self.ageofdgpsdata: float | None = None

        #: ID of DGPS station used in differential correction.
        self.dgpsid: int | None = None

        #: Vendor-specific extensions of the point.
        self.extensions: Extensions | None = None

        if self._element is not None:
            self._parse()

    @classmethod
    def from_coordinates(
        cls,
        lat: float,
        lon: float,
        ele: float | None = None,
        time: datetime | None = None,
    ) -> Point:
        """Create a point from the given coordinates.

        Args:
            lat: The latitude of the point.
            lon: The longitude of the point.
            ele: The elevation of the point. Defaults to `None`.
            time: The timestamp of the point. Defaults to `None`.
        """
        point = cls()
        point.lat = float(lat)
        point.lon = float(lon)
        if ele is not None:
            point.ele = float(ele)
        point.time = time
        return point

    def _parse(self) -> None:  # noqa: C901
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        # required
        lat, lon = self._element.get("lat"), self._element.get("lon")
        if lat is None or lon is None:
            raise ParseError(
                f"A point requires `lat` and `lon` attributes (line {self._element.sourceline})."
            )
        self.lat = float(lat)
        self.lon = float(lon)

        # position info
        if (ele := self._find_text("ele")) is not None:
            self.ele = float(ele)
        if (time := self._find_text("time")) is not None:
            self.time = isoparse(time)
        if (magvar := self._find_text("magvar")) is not None:
            self.magvar = float(magvar)
        if (geoidheight := self._find_text("geoidheight")) is not None:
            self.geoidheight = float(geoidheight)

        # description info
        self.name = self._find_text("name")
        self.cmt = self._find_text("cmt")
        self.desc = self._find_text("desc")
        self.src = self._find_text("src")
        for link in self._element.iterfind("link", namespaces=self._nsmap):
            self.links.append(Link(link))
        self.sym = self._find_text("sym")
        self.type = self._find_text("type")

        # accuracy info
        self.fix = self._find_text("fix")
        if (sat := self._find_text("sat")) is not None:
            self.sat = int(sat)
        if (hdop := self._find_text("hdop")) is not None:
            self.hdop = float(hdop)
        if (vdop := self._find_text("vdop")) is not None:
            self.vdop = float(vdop)
        if (pdop := self._find_text("pdop")) is not None:
            self.pdop = float(pdop)
        if (ageofdgpsdata := self._find_text("ageofdgpsdata")) is not None:
            self.ageofdgpsdata = float(ageofdgpsdata)
        if (dgpsid := self._find_text("dgpsid")) is not None:
            self.dgpsid = int(dgpsid)

        if (
            extensions := self._element.find("extensions", namespaces=self._nsmap)
        ) is not None:
            self.extensions = Extensions(extensions)

    def _build(self, context: RenderContext, tag: str = "wpt") -> etree._Element:
        point = super()._build(context, tag)
        point.set("lat", str(self.lat))
        point.set("lon", str(self.lon))

        self._sub_element(point, "ele", self.ele)
        if self.time is not None:
            self._sub_element(point, "time", format_datetime(self.time))
        self._sub_element(point, "magvar", self.magvar)
        self._sub_element(point, "geoidheight", self.geoidheight)

        self._sub_element(point, "name", self.name)
        self._sub_element(point, "cmt", self.cmt)
        self._sub_element(point, "desc", self.desc)
        self._sub_element(point, "src", self.src)
        for link in self.links:
            point.append(link._build(context))
        self._sub_element(point, "sym", self.sym)
        self._sub_element(point, "type", self.type)

        self._sub_element(point, "fix", self.fix)
        self._sub_element(point, "sat", self.sat)
        self._sub_element(point, "hdop", self.hdop)
        self._sub_element(point, "vdop", self.vdop)
        self._sub_element(point, "pdop", self.pdop)
        self._sub_element(point, "ageofdgpsdata", self.ageofdgpsdata)
        self._sub_element(point, "dgpsid", self.dgpsid)

        if self.extensions is not None:
            point.append(self.extensions._build(context))

        return point

    def to_dict(self) -> dict[str, Any]:
        return {
            "lat": self.lat,
            "lon": self.lon,
            "ele": self.ele,
            "time": format_output_datetime(self.time),
            "magvar": self.magvar,
            "geoidheight": self.geoidheight,
            "name": self.name,
            "cmt": self.cmt,
            "desc": self.desc,
            "src": self.src,
            "links": serialize(self.links),
            "sym": self.sym,
            "type": self.type,
            "fix": self.fix,
            "sat": self.sat,
            "hdop": self.hdop,
            "vdop": self.vdop,
            "pdop": self.pdop,
            "ageofdgpsdata": self.ageofdgpsdata,
            "dgpsid": self.dgpsid,
            "extensions": serialize(self.extensions),
        }

    @property
    def _geojson_coordinates(self) -> GeoJSONPosition:
        """The GeoJSON-compatible coordinates of the point.

        The coordinates are of the form [lon, lat, ele (alt)], where ele is
        only present when the point has an elevation (zero included).
        """
        if self.ele is not None:
            return [float(self.lon), float(self.lat), float(self.ele)]
        return [float(self.lon), float(self.lat)]
