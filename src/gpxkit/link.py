"""This module provides a Link object to contain GPX links."""
from __future__ import annotations

from typing import Any

from lxml import etree

from .context import RenderContext
from .element import Element
from .errors import ParseError


class Link(Element):
    """A link class for the GPX data format.

    A link to an external resource (Web page, digital photo, video clip, etc)
    with additional information.

    Args:
        element: The link XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: URL of hyperlink.
        self.href: str

        #: Text of hyperlink.
        self.text: str | None = None

        #: Mime type of content (image/jpeg)
        self.type: str | None = None

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        # required
        if (href := self._element.get("href")) is None:
            raise ParseError("A link requires a `href` attribute.")
        self.href = href

        self.text = self._find_text("text")
        self.type = self._find_text("type")

    def _build(self, context: RenderContext, tag: str = "link") -> etree._Element:
        link = super()._build(context, tag)
        link.set("href", self.href)

        self._sub_element(link, "text", self.text)
        self._sub_element(link, "type", self.type)

        return link

    def to_dict(self) -> dict[str, Any]:
        return {
            "href": self.href,
            "text": self.text,
            "type": self.type,
        }
