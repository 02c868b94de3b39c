"""
This module provides a TrackSegment object to contain GPX track segments - an ordered list of
points describing a path.
"""
from __future__ import annotations

from typing import Any, Iterator

from lxml import etree

from .context import RenderContext
from .element import Element
from .extensions import Extensions
from .point import Point
from .serialization import serialize


class TrackSegment(Element):
    """A track segment class for the GPX data format.

    A Track Segment holds a list of Track Points which are logically connected
    in order. To represent a single GPS track where GPS reception was lost, or
    the GPS receiver was turned off, start a new Track Segment for each
    continuous span of track data.

    Args:
        element: The track segment XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: A Track Point holds the coordinates, elevation, timestamp, and
        #: metadata for a single point in a track.
        self.trkpts: list[Point] = []
        self.points = self.trkpts  #: Alias of :attr:`trkpts`.

        #: Vendor-specific extensions of the segment.
        self.extensions: Extensions | None = None

        if self._element is not None:
            self._parse()

    def __getitem__(self, index: int) -> Point:
        """Returns the track point at the given index."""
        return self.trkpts[index]

    def __len__(self) -> int:
        """Returns the number of track points."""
        return len(self.trkpts)

    def __iter__(self) -> Iterator[Point]:
        """Iterates over the track points."""
        yield from self.trkpts

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        # track points
        for trkpt in self._element.iterfind("trkpt", namespaces=self._nsmap):
            self.trkpts.append(Point(trkpt))

        if (
            extensions := self._element.find("extensions", namespaces=self._nsmap)
        ) is not None:
            self.extensions = Extensions(extensions)

    def _build(self, context: RenderContext, tag: str = "trkseg") -> etree._Element:
        track_segment = super()._build(context, tag)

        for _trkpt in self.trkpts:
            track_segment.append(_trkpt._build(context, tag="trkpt"))

        if self.extensions is not None:
            track_segment.append(self.extensions._build(context))

        return track_segment

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": serialize(self.trkpts),
            "extensions": serialize(self.extensions),
        }
