"""This module provides a Bounds object to contain GPX bounds."""
from __future__ import annotations

from typing import Any

from lxml import etree

from .context import RenderContext
from .element import Element
from .errors import ParseError


class Bounds(Element):
    """Two lat/lon pairs defining the extent of an element.

    Args:
        element: The bounds XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        self.minlat: float
        self.minlon: float
        self.maxlat: float
        self.maxlon: float

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        try:
            self.minlat = float(self._element.get("minlat"))
            self.minlon = float(self._element.get("minlon"))
            self.maxlat = float(self._element.get("maxlat"))
            self.maxlon = float(self._element.get("maxlon"))
        except TypeError as e:
            raise ParseError("Bounds require all four min/max attributes.") from e

    def _build(self, context: RenderContext, tag: str = "bounds") -> etree._Element:
        bounds = super()._build(context, tag)
        bounds.set("minlat", str(self.minlat))
        bounds.set("minlon", str(self.minlon))
        bounds.set("maxlat", str(self.maxlat))
        bounds.set("maxlon", str(self.maxlon))
        return bounds

    def to_dict(self) -> dict[str, Any]:
        return {
            "minlat": self.minlat,
            "minlon": self.minlon,
            "maxlat": self.maxlat,
            "maxlon": self.maxlon,
        }
