"""Process-wide render configuration.

The :data:`settings` object is read at render time, so changing one of its
fields affects every conversion that starts afterwards::

    >>> from gpxkit.config import settings
    >>> settings.pretty_print = False
    >>> settings.datetime_timezone_output = "Europe/Bratislava"
"""
from __future__ import annotations

from dateutil import tz
from pydantic import BaseModel, ConfigDict, field_validator

NAME = "gpxkit"
VERSION = "1.0.0"


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    #: Indent XML and JSON output. Never changes structure or values.
    pretty_print: bool = True

    #: :func:`~datetime.datetime.strftime` pattern for emitted timestamps.
    #: `None` means ISO 8601.
    datetime_format: str | None = None

    #: IANA name of the timezone emitted timestamps are converted to.
    datetime_timezone_output: str = "UTC"

    @field_validator("datetime_timezone_output")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if tz.gettz(value) is None:
            raise ValueError(f"unknown timezone: {value!r}")
        return value


settings = Settings()


def signature() -> str:
    """The creator string used when a document does not name its creator."""
    return f"{NAME}/{VERSION}"
