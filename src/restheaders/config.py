"""Header collection configuration.

HeadersConfig is a frozen dataclass — immutable after creation, validated
once at construction, shared freely between collections.
"""

from dataclasses import dataclass

from restheaders.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class HeadersConfig:
    """Settings for ``HttpHeaders``. Immutable after creation.

    The defaults follow HTTP field semantics. Override what you need::

        config = HeadersConfig(separator=",")
    """

    # Joins repeated values into the combined field value
    separator: str = ", "

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str):
            msg = f"separator must be a str, got {type(self.separator).__name__}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = HeadersConfig()
