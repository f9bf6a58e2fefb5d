# ABOUTME: Exception types raised by the OpenWeatherMap client.
# ABOUTME: Absent fields never raise; only bad arguments and unparseable responses do.


class OWMError(Exception):
    """Base class for errors raised by this library."""


class InvalidArgumentError(OWMError, ValueError):
    """An argument is outside the range the operation accepts."""


class MalformedResponseError(OWMError, ValueError):
    """Response text could not be parsed as a JSON object."""
