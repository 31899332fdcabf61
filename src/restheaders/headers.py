"""Case-insensitive, multi-valued HTTP header collection.

``HttpHeaders`` maps each header name, compared case-insensitively, to
one ``HttpHeader`` holding every value added under that name, in order.
Message builders fill it with ``add`` and read it back by name or by
iterating the entries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from restheaders.config import DEFAULT_CONFIG, HeadersConfig
from restheaders.errors import InvalidHeaderName

logger = logging.getLogger("restheaders")


def _check_name(name: object) -> str:
    """Return *name* if it is a usable header name, else raise."""
    if not isinstance(name, str) or not name:
        logger.debug("Rejected header name %r", name)
        raise InvalidHeaderName(name=name)
    return name


class HttpHeader:
    """One header field: its display name and every value added for it.

    The display name is kept exactly as first supplied. Values keep
    insertion order and are never deduplicated. Values are stored as
    ``str``; anything else is converted with ``str()`` on the way in.
    """

    __slots__ = ("_name", "_separator", "_values")

    _name: str
    _separator: str
    _values: list[str]

    def __init__(self, name: str, value: str, *, separator: str = DEFAULT_CONFIG.separator) -> None:
        self._name = _check_name(name)
        self._separator = separator
        self._values = [str(value)]

    @property
    def name(self) -> str:
        """The header name as first supplied."""
        return self._name

    @property
    def value(self) -> str:
        """All values joined in insertion order (a lone value is returned as-is)."""
        if len(self._values) == 1:
            return self._values[0]
        return self._separator.join(self._values)

    @property
    def values(self) -> tuple[str, ...]:
        """Snapshot of the individual values, in insertion order."""
        return tuple(self._values)

    def add_value(self, value: str) -> None:
        """Append *value*, keeping any identical values already present."""
        self._values.append(str(value))

    def get_value(self) -> str:
        return self.value

    def get_values(self) -> tuple[str, ...]:
        return self.values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeader):
            return NotImplemented
        return self._name.lower() == other._name.lower() and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._name}: {self.value}"

    def __repr__(self) -> str:
        return f"HttpHeader({self._name!r}, {self._values!r})"


class HttpHeaders:
    """Mutable, case-insensitive collection of ``HttpHeader`` entries.

    ``add`` merges values for names that differ only in case; the first
    spelling of a name is the one kept for display. ``get_value`` and
    ``get_values`` return ``None`` for a header that was never added.

    Iteration yields one entry per distinct name in no particular
    order. Not thread-safe: callers sharing a collection across threads
    must lock around it.
    """

    __slots__ = ("_config", "_entries")

    _config: HeadersConfig
    _entries: dict[str, HttpHeader]

    def __init__(
        self,
        headers: Mapping[str, str] | None = None,
        *,
        config: HeadersConfig = DEFAULT_CONFIG,
    ) -> None:
        self._config = config
        self._entries = {}
        if headers:
            for name, value in headers.items():
                self.add(name, value)

    @property
    def config(self) -> HeadersConfig:
        return self._config

    def add(self, name: str, value: str) -> HttpHeaders:
        """Add *value* under *name* and return ``self`` for chaining.

        Raises:
            InvalidHeaderName: *name* is ``None``, not a string, or empty.
                The collection is left untouched.
        """
        name = _check_name(name)
        key = name.lower()
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = HttpHeader(name, value, separator=self._config.separator)
        else:
            if entry.name != name:
                logger.debug("Merging header %r into existing %r", name, entry.name)
            entry.add_value(value)
        return self

    def get_value(self, name: str) -> str | None:
        """Return the combined value for *name*, or ``None`` if absent."""
        entry = self._get_header(name)
        return None if entry is None else entry.value

    def get_values(self, name: str) -> tuple[str, ...] | None:
        """Return the individual values for *name*, or ``None`` if absent."""
        entry = self._get_header(name)
        return None if entry is None else entry.values

    def to_dict(self) -> dict[str, str]:
        """Flatten to ``{display name: combined value}``."""
        return {entry.name: entry.value for entry in self._entries.values()}

    def _get_header(self, name: object) -> HttpHeader | None:
        if not isinstance(name, str):
            return None
        return self._entries.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return self._get_header(name) is not None

    def __iter__(self) -> Iterator[HttpHeader]:
        return iter(tuple(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        items = ", ".join(f"{entry.name!r}: {entry.value!r}" for entry in self._entries.values())
        return f"HttpHeaders({{{items}}})"
