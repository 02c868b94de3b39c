"""This module provides static type annotations for GPX data."""
from abc import abstractmethod
from collections.abc import Sequence
from typing import Any

from typing_extensions import (
    Literal,  # Python 3.8+
    Protocol,  # Python 3.8+
    TypeAlias,  # Python 3.10+
    TypedDict,  # Python 3.8+
    runtime_checkable,  # Python 3.8+
)

#: A type alias for a `GeoJSON <https://geojson.org/>`_ `position <https://datatracker.ietf.org/doc/html/rfc7946#section-3.1.1>`_ array -- `[lon, lat]` or `[lon, lat, ele]`.
GeoJSONPosition: TypeAlias = list[float]


class GeoJSONPoint(TypedDict):
    """A `GeoJSON <https://geojson.org/>`_ `Point <https://datatracker.ietf.org/doc/html/rfc7946#section-3.1.2>`_ object."""

    type: Literal["Point"]
    coordinates: GeoJSONPosition


class GeoJSONLineString(TypedDict):
    """A `GeoJSON <https://geojson.org/>`_ `LineString <https://datatracker.ietf.org/doc/html/rfc7946#section-3.1.4>`_ object."""

    type: Literal["LineString"]
    coordinates: Sequence[GeoJSONPosition]


class GeoJSONFeature(TypedDict):
    """A `GeoJSON <https://geojson.org/>`_ `Feature <https://datatracker.ietf.org/doc/html/rfc7946#section-3.2>`_ object."""

    type: Literal["Feature"]
    properties: dict[str, Any]
    geometry: GeoJSONPoint | GeoJSONLineString


class GeoJSONFeatureCollection(TypedDict):
    """A `GeoJSON <https://geojson.org/>`_ `FeatureCollection <https://datatracker.ietf.org/doc/html/rfc7946#section-3.3>`_ object, carrying the legacy named `crs` member."""

    type: Literal["FeatureCollection"]
    name: str
    crs: dict[str, Any]
    features: list[GeoJSONFeature]


@runtime_checkable
class SupportsToDict(Protocol):
    """A :class:`~typing.Protocol` for GPX entities that can render themselves
    as a value tree of dicts, lists and scalars."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        ...
