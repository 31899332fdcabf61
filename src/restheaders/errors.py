"""restheaders exception hierarchy.

Every error raised by the package derives from ``RestHeadersError`` so
callers can catch the whole family with one ``except`` clause.
"""

from dataclasses import dataclass


class RestHeadersError(Exception):
    """Base for all restheaders-specific errors."""


class ConfigurationError(RestHeadersError):
    """Raised when a ``HeadersConfig`` is built with invalid settings."""


@dataclass(frozen=True, slots=True)
class InvalidHeaderName(RestHeadersError, ValueError):  # noqa: N818 — mirrors ValueError naming
    """A header was added with a missing or empty name.

    Raised synchronously by ``HttpHeaders.add`` and ``HttpHeader``
    before any state changes. Also a ``ValueError``, so generic
    argument-checking code catches it too.
    """

    name: object = None

    def __reduce__(self) -> tuple[type["InvalidHeaderName"], tuple[object]]:
        return (type(self), (self.name,))

    def __str__(self) -> str:
        if self.name is None:
            return "Header name must not be None"
        if not isinstance(self.name, str):
            return f"Header name must be a str, got {type(self.name).__name__}"
        return "Header name must not be empty"
