"""This module provides a Copyright object to contain GPX copyright notices."""
from __future__ import annotations

from typing import Any

from lxml import etree

from .context import RenderContext
from .element import Element
from .errors import ParseError


class Copyright(Element):
    """Information about the copyright holder and any license governing use of
    the file.

    Args:
        element: The copyright XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: Copyright holder (TopoSoft, Inc.)
        self.author: str

        #: Year of copyright.
        self.year: int | None = None

        #: Link to external file containing license text.
        self.license: str | None = None

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        if (author := self._element.get("author")) is None:
            raise ParseError("A copyright requires an `author` attribute.")
        self.author = author

        if (year := self._find_text("year")) is not None:
            self.year = int(year)
        self.license = self._find_text("license")

    def _build(
        self, context: RenderContext, tag: str = "copyright"
    ) -> etree._Element:
        copyright = super()._build(context, tag)
        copyright.set("author", self.author)

        self._sub_element(copyright, "year", self.year)
        self._sub_element(copyright, "license", self.license)

        return copyright

    def to_dict(self) -> dict[str, Any]:
        return {
            "author": self.author,
            "year": self.year,
            "license": self.license,
        }
