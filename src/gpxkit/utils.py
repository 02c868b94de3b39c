"""This module contains various utility functions."""
import re
from datetime import datetime
from json import JSONEncoder
from typing import Any

from dateutil import tz

from .config import settings


def remove_encoding_from_string(s: str) -> str:
    """
    Removes encoding declarations (e.g. encoding="utf-8") from the string, if
    any.

    Args:
        s: The string.

    Returns:
        The string with any encoding declarations removed.
    """
    return re.sub(r"(encoding=[\"\'].+?[\"\'])", "", s)


def format_datetime(dt: datetime) -> str:
    """
    Formats a datetime object to the format used in GPX files.

    Naive datetimes are taken to be UTC, as GPX requires.

    Args:
        dt: The datetime object.

    Returns:
        The formatted datetime string.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    return (
        dt.astimezone(tz.UTC)
        .isoformat(timespec="milliseconds" if dt.microsecond else "seconds")
        .replace("+00:00", "Z")
    )


def format_output_datetime(dt: datetime | None) -> str | None:
    """
    Formats a datetime object for JSON and GeoJSON output, using the
    configured format and output timezone.

    Args:
        dt: The datetime object, or `None`.

    Returns:
        The formatted datetime string, or `None` if `dt` is `None`.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    dt = dt.astimezone(tz.gettz(settings.datetime_timezone_output))
    if settings.datetime_format is None:
        return dt.isoformat()
    return dt.strftime(settings.datetime_format)


class CustomJSONEncoder(JSONEncoder):
    """Custom JSON encoder."""

    def default(self, obj: Any) -> Any:
        """Convert `obj` to a JSON serializable type. Overrides the default
        `JSONEncoder`.
        """
        if isinstance(obj, datetime):
            return format_output_datetime(obj)
        return super().default(obj)
