"""
This module provides a Route object to contain GPX routes - ordered lists of
points representing a series of turn points leading to a destination.
"""
from __future__ import annotations

from typing import Any, Iterator

from lxml import etree

from .context import RenderContext
from .element import Element
from .extensions import Extensions
from .link import Link
from .point import Point
from .serialization import serialize


class Route(Element):
    """A route class for the GPX data format.

    A route represents an ordered list of waypoints representing a series of
    turn points leading to a destination.

    Args:
        element: The route XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: GPS name of route.
        self.name: str | None = None

        #: GPS comment for route.
        self.cmt: str | None = None

        #: Text description of route for user. Not sent to GPS.
        self.desc: str | None = None

        #: Source of data. Included to give user some idea of reliability and
        #: accuracy of data.
        self.src: str | None = None

        #: Links to external information about the route.
        self.links: list[Link] = []

        #: GPS route number.
        self.number: int | None = None

        #: Type (classification) of route.
        self.type: str | None = None

        #: Vendor-specific extensions of the route.
        self.extensions: Extensions | None = None

        #: A list of route points.
        self.rtepts: list[Point] = []
        self.points = self.rtepts  #: Alias of :attr:`rtepts`.

        if self._element is not None:
            self._parse()

    def __getitem__(self, index: int) -> Point:
        """Returns the route point at the given index."""
        return self.rtepts[index]

    def __len__(self) -> int:
        """Returns the number of route points."""
        return len(self.rtepts)

    def __iter__(self) -> Iterator[Point]:
        """Iterates over the route points."""
        yield from self.rtepts

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        self.name = self._find_text("name")
        self.cmt = self._find_text("cmt")
        self.desc = self._find_text("desc")
        self.src = self._find_text("src")
        for link in self._element.iterfind("link", namespaces=self._nsmap):
            self.links.append(Link(link))
        if (number := self._find_text("number")) is not None:
            self.number = int(number)
        self.type = self._find_text("type")

        if (
            extensions := self._element.find("extensions", namespaces=self._nsmap)
        ) is not None:
            self.extensions = Extensions(extensions)

        # route points
        for rtept in self._element.iterfind("rtept", namespaces=self._nsmap):
            self.rtepts.append(Point(rtept))

    def _build(self, context: RenderContext, tag: str = "rte") -> etree._Element:
        route = super()._build(context, tag)

        self._sub_element(route, "name", self.name)
        self._sub_element(route, "cmt", self.cmt)
        self._sub_element(route, "desc", self.desc)
        self._sub_element(route, "src", self.src)
        for link in self.links:
            route.append(link._build(context))
        self._sub_element(route, "number", self.number)
        self._sub_element(route, "type", self.type)

        if self.extensions is not None:
            route.append(self.extensions._build(context))

        for _rtept in self.rtepts:
            route.append(_rtept._build(context, tag="rtept"))

        return route

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "cmt": self.cmt,
            "desc": self.desc,
            "src": self.src,
            "links": serialize(self.links),
            "number": self.number,
            "type": self.type,
            "extensions": serialize(self.extensions),
            "points": serialize(self.rtepts),
        }
