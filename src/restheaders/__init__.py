"""restheaders — case-insensitive, multi-valued HTTP header collection.

Assembles and inspects the header fields of an HTTP message. Repeated
names merge into one entry whose values keep their insertion order.

Basic usage::

    from restheaders import HttpHeaders

    headers = HttpHeaders({"Accept": "text/html"})
    headers.add("accept", "application/json").add("X-Request-Id", "42")

    headers.get_value("ACCEPT")    # "text/html, application/json"
    headers.get_values("Accept")   # ("text/html", "application/json")
    headers.get_value("X-Missing") # None
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HeaderView",
    "HeadersConfig",
    "HttpHeader",
    "HttpHeaders",
    "InvalidHeaderName",
    "RestHeadersError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import restheaders`` cheap while providing a flat top-level API.
    """
    if name in ("HttpHeader", "HttpHeaders"):
        from restheaders import headers as _headers

        return getattr(_headers, name)

    if name == "HeadersConfig":
        from restheaders.config import HeadersConfig

        return HeadersConfig

    if name == "HeaderView":
        from restheaders._internal.multimap import HeaderView

        return HeaderView

    if name in ("ConfigurationError", "InvalidHeaderName", "RestHeadersError"):
        from restheaders import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
