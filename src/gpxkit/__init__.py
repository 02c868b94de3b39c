"""
gpxkit is a library for reading GPX files and converting them to GPX/XML, JSON
and GeoJSON.
"""
from .bounds import Bounds
from .config import VERSION as __version__
from .config import settings
from .context import ExtensionNamespace, RenderContext
from .copyright import Copyright
from .errors import InvalidGPXError, ParseError, UnsupportedFormatError
from .extensions import Extensions, TrackPointExtension
from .gpx import Format, GpxFile
from .link import Link
from .metadata import Metadata
from .person import Email, Person
from .point import Point
from .route import Route
from .track import Track
from .track_segment import TrackSegment

__all__ = [
    "__version__",
    "settings",
    "Bounds",
    "Copyright",
    "Email",
    "ExtensionNamespace",
    "Extensions",
    "Format",
    "GpxFile",
    "InvalidGPXError",
    "Link",
    "Metadata",
    "ParseError",
    "Person",
    "Point",
    "RenderContext",
    "Route",
    "Track",
    "TrackPointExtension",
    "TrackSegment",
    "UnsupportedFormatError",
]
