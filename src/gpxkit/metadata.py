"""This module provides a Metadata object to contain GPX metadata."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from dateutil.parser import isoparse
from lxml import etree

from .bounds import Bounds
from .context import RenderContext
from .copyright import Copyright
from .element import Element
from .extensions import Extensions
from .link import Link
from .person import Person
from .serialization import serialize
from .utils import format_datetime, format_output_datetime


class Metadata(Element):
    """A metadata class for the GPX data format.

    Information about the GPX file, author, and copyright restrictions goes in
    the metadata section. Providing rich, meaningful information about your
    GPX files allows others to search for and use your GPS data.

    Args:
        element: The metadata XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: The name of the GPX file.
        self.name: str | None = None

        #: A description of the contents of the GPX file.
        self.desc: str | None = None

        #: The person or organization who created the GPX file.
        self.author: Person | None = None

        #: Copyright and license information governing use of the file.
        self.copyright: Copyright | None = None

        #: URLs associated with the location described in the file.
        self.links: list[Link] = []

        #: The creation date of the file.
        self.time: datetime | None = None

        #: Keywords associated with the file.
        self.keywords: str | None = None

        #: Minimum and maximum coordinates which describe the extent of the
        #: coordinates in the file.
        self.bounds: Bounds | None = None

        #: Vendor-specific extensions of the metadata.
        self.extensions: Extensions | None = None

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        self.name = self._find_text("name")
        self.desc = self._find_text("desc")
        if (author := self._element.find("author", namespaces=self._nsmap)) is not None:
            self.author = Person(author)
        if (
            copyright := self._element.find("copyright", namespaces=self._nsmap)
        ) is not None:
            self.copyright = Copyright(copyright)
        for link in self._element.iterfind("link", namespaces=self._nsmap):
            self.links.append(Link(link))
        if (time := self._find_text("time")) is not None:
            self.time = isoparse(time)
        self.keywords = self._find_text("keywords")
        if (bounds := self._element.find("bounds", namespaces=self._nsmap)) is not None:
            self.bounds = Bounds(bounds)
        if (
            extensions := self._element.find("extensions", namespaces=self._nsmap)
        ) is not None:
            self.extensions = Extensions(extensions)

    def _build(self, context: RenderContext, tag: str = "metadata") -> etree._Element:
        metadata = super()._build(context, tag)

        self._sub_element(metadata, "name", self.name)
        self._sub_element(metadata, "desc", self.desc)

        if self.author is not None:
            metadata.append(self.author._build(context))

        if self.copyright is not None:
            metadata.append(self.copyright._build(context))

        for link in self.links:
            metadata.append(link._build(context))

        if self.time is not None:
            self._sub_element(metadata, "time", format_datetime(self.time))

        self._sub_element(metadata, "keywords", self.keywords)

        if self.bounds is not None:
            metadata.append(self.bounds._build(context))

        if self.extensions is not None:
            metadata.append(self.extensions._build(context))

        return metadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "desc": self.desc,
            "author": serialize(self.author),
            "copyright": serialize(self.copyright),
            "links": serialize(self.links),
            "time": format_output_datetime(self.time),
            "keywords": self.keywords,
            "bounds": serialize(self.bounds),
            "extensions": serialize(self.extensions),
        }
