"""This module provides various error types."""


class InvalidGPXError(ValueError):
    """GPX is invalid."""


class ParseError(ValueError):
    """A required element or attribute is missing."""


class UnsupportedFormatError(ValueError):
    """The requested output format is not supported."""
