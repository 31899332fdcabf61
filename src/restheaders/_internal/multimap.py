"""HeaderView protocol — shared read-only interface for header collections.

A structural protocol so message builders and other collaborators can
accept any header collection without coupling to ``HttpHeaders``.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from restheaders.headers import HttpHeader


@runtime_checkable
class HeaderView(Protocol):
    """A read-only, case-insensitive view over multi-valued headers.

    ``get_value`` returns the combined value for a name, or ``None``.
    ``get_values`` returns every individual value, or ``None``.
    Iteration yields one ``HttpHeader`` per distinct name, in no
    particular order.
    """

    def __contains__(self, name: object) -> bool: ...
    def __iter__(self) -> Iterator[HttpHeader]: ...
    def __len__(self) -> int: ...
    def get_value(self, name: str) -> str | None: ...
    def get_values(self, name: str) -> tuple[str, ...] | None: ...
