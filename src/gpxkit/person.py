"""This module provides Person and Email objects to contain GPX authors."""
from __future__ import annotations

from typing import Any

from lxml import etree

from .context import RenderContext
from .element import Element
from .errors import ParseError
from .link import Link
from .serialization import serialize


class Email(Element):
    """An email address, broken into two parts (id and domain) to help prevent
    email harvesting.

    Args:
        element: The email XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: Id half of email address (e.g. billgates2004).
        self.id: str

        #: Domain half of email address (e.g. hotmail.com).
        self.domain: str

        if self._element is not None:
            self._parse()

    def __str__(self) -> str:
        return f"{self.id}@{self.domain}"

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        _id = self._element.get("id")
        domain = self._element.get("domain")
        if _id is None or domain is None:
            raise ParseError("An email requires `id` and `domain` attributes.")
        self.id = _id
        self.domain = domain

    def _build(self, context: RenderContext, tag: str = "email") -> etree._Element:
        email = super()._build(context, tag)
        email.set("id", self.id)
        email.set("domain", self.domain)
        return email

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "domain": self.domain}


class Person(Element):
    """A person or organization.

    Args:
        element: The person XML element. Defaults to `None`.
    """

    def __init__(self, element: etree._Element | None = None) -> None:
        super().__init__(element)

        #: Name of person or organization.
        self.name: str | None = None

        #: Email address.
        self.email: Email | None = None

        #: Link to Web site or other external information about person.
        self.link: Link | None = None

        if self._element is not None:
            self._parse()

    def _parse(self) -> None:
        super()._parse()

        # assertion to satisfy mypy
        assert self._element is not None

        self.name = self._find_text("name")
        if (email := self._element.find("email", namespaces=self._nsmap)) is not None:
            self.email = Email(email)
        if (link := self._element.find("link", namespaces=self._nsmap)) is not None:
            self.link = Link(link)

    def _build(self, context: RenderContext, tag: str = "author") -> etree._Element:
        person = super()._build(context, tag)

        self._sub_element(person, "name", self.name)

        if self.email is not None:
            person.append(self.email._build(context))

        if self.link is not None:
            person.append(self.link._build(context))

        return person

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": serialize(self.email),
            "link": serialize(self.link),
        }
