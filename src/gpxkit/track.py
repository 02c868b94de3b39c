"""
This module provides a Track object to contain GPX tracks - an ordered list of
points describing a path.
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
from .track_segment import TrackSegment


class Track(Element):
    """A track class for the GPX data format.

    A track represents an ordered list of points describing a path.

    Args:
        element: The track XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: GPS name of track.
        self.name: str | None = None

        #: GPS comment for track.
        self.cmt: str | None = None

        #: User description of track.
        self.desc: str | None = None

        #: Source of data. Included to give user some idea of reliability and
        #: accuracy of data.
        self.src: str | None = None

        #: Links to external information about track.
        self.links: list[Link] = []

        #: GPS track number.
        self.number: int | None = None

        #: Type (classification) of track.
        self.type: str | None = None

        #: Vendor-specific extensions of the track.
        self.extensions: Extensions | None = None

        #: A Track Segment holds a list of Track Points which are logically
        #: connected in order. To represent a single GPS track where GPS
        #: reception was lost, or the GPS receiver was turned off, start a new
        #: Track Segment for each continuous span of track data.
        self.trksegs: list[TrackSegment] = []
        self.segments = self.trksegs  #: Alias of :attr:`trksegs`.

        if self._element is not None:
            self._parse()

    def __getitem__(self, index: int) -> TrackSegment:
        """Returns the track segment at the given index."""
        return self.trksegs[index]

    def __len__(self) -> int:
        """Returns the number of track segments."""
        return len(self.trksegs)

    def __iter__(self) -> Iterator[TrackSegment]:
        """Iterates over the track segments."""
        yield from self.trksegs

    @property
    def points(self) -> list[Point]:
        """All track points of all segments, in segment order."""
        return [trkpt for trkseg in self.trksegs for trkpt in trkseg]

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

        # segments
        for trkseg in self._element.iterfind("trkseg", namespaces=self._nsmap):
            self.trksegs.append(TrackSegment(trkseg))

    def _build(self, context: RenderContext, tag: str = "trk") -> etree._Element:
        track = super()._build(context, tag)

        self._sub_element(track, "name", self.name)
        self._sub_element(track, "cmt", self.cmt)
        self._sub_element(track, "desc", self.desc)
        self._sub_element(track, "src", self.src)
        for link in self.links:
            track.append(link._build(context))
        self._sub_element(track, "number", self.number)
        self._sub_element(track, "type", self.type)

        if self.extensions is not None:
            track.append(self.extensions._build(context))

        for segment in self.trksegs:
            track.append(segment._build(context))

        return track

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
            "segments": serialize(self.trksegs),
        }
